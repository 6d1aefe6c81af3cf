"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- SceneImporterService: scene import and library scan
- path_matcher: pure matching of entity names in file paths
- RelationshipLinker: applies matches to a scene and persists it
- CatalogService: entity creation and index synchronisation

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
