"""
Entités du catalogue.

Acteurs, labels, studios et films sont créés et indexés indépendamment,
avant tout import de scène susceptible de les référencer. Une scène les
référence par leur identifiant, sans jamais les posséder.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional

from src.core.value_objects.matching import EntityKind
from src.utils.helpers import generate_id


@dataclass
class NamedEntity:
    """
    Entité nommée du catalogue.

    Attributs :
        name : Nom affiché, recherché tel quel dans les chemins de fichiers
        aliases : Autres noms sous lesquels l'entité peut apparaître
        id : Identifiant unique et immuable, préfixé par le type
        created_at : Date de création de l'enregistrement
    """

    KIND: ClassVar[EntityKind]
    ID_PREFIX: ClassVar[str]

    name: str = ""
    aliases: tuple[str, ...] = ()
    id: str = ""
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.id:
            self.id = generate_id(self.ID_PREFIX)

    @property
    def terms(self) -> tuple[str, ...]:
        """Nom puis alias, dans cet ordre."""
        return (self.name, *self.aliases)


@dataclass
class Actor(NamedEntity):
    KIND: ClassVar[EntityKind] = EntityKind.ACTOR
    ID_PREFIX: ClassVar[str] = "ac"


@dataclass
class Label(NamedEntity):
    KIND: ClassVar[EntityKind] = EntityKind.LABEL
    ID_PREFIX: ClassVar[str] = "la"


@dataclass
class Studio(NamedEntity):
    KIND: ClassVar[EntityKind] = EntityKind.STUDIO
    ID_PREFIX: ClassVar[str] = "st"


@dataclass
class Movie(NamedEntity):
    KIND: ClassVar[EntityKind] = EntityKind.MOVIE
    ID_PREFIX: ClassVar[str] = "mo"


ENTITY_CLASSES: dict[EntityKind, type[NamedEntity]] = {
    EntityKind.ACTOR: Actor,
    EntityKind.LABEL: Label,
    EntityKind.STUDIO: Studio,
    EntityKind.MOVIE: Movie,
}
