# Use-case diagrams and the portals built from them

from .use_case_diagram import (
    ActorId,
    AssociationError,
    DiagramActor,
    UseCase,
    UseCaseDiagram,
    UseCaseId,
)
from .portal_builder import MissingActionError, build_portal, visibility_matrix

__all__ = [
    'ActorId',
    'AssociationError',
    'DiagramActor',
    'UseCase',
    'UseCaseDiagram',
    'UseCaseId',
    'MissingActionError',
    'build_portal',
    'visibility_matrix',
]
