"""Parameter models with nullability and varargs shaping."""

from enum import Enum
from typing import List, Optional

from jdocminer.data_models import ParameterModel, TypeReference, ARRAY_SUFFIX
from jdocminer.doctree.model import AnnotationDesc, ExecutableMemberDoc, ParameterDoc


class NullabilityMarker(Enum):
    """Annotation simple names (lower case) that state whether a parameter may be null."""
    NULLABLE = ("nullable", True)
    NOTNULL = ("notnull", False)
    NONNULL = ("nonnull", False)

    def __init__(self, annotation_name: str, nullable: bool):
        self.annotation_name = annotation_name
        self.nullable = nullable

    @classmethod
    def match(cls, annotation: AnnotationDesc) -> Optional['NullabilityMarker']:
        """Return the marker named by ``annotation``, compared case-insensitively."""
        name = annotation.simple_name.lower()
        for marker in cls:
            if marker.annotation_name == name:
                return marker
        return None


def infer_nullability(annotations: List[AnnotationDesc]) -> Optional[bool]:
    """Scan annotations in order; the first recognized marker decides."""
    for annotation in annotations:
        marker = NullabilityMarker.match(annotation)
        if marker is not None:
            return marker.nullable
    return None


class ParameterModelBuilder:
    """Builds ParameterModels for the formal parameters of a member."""

    def build(self, member: ExecutableMemberDoc) -> List[ParameterModel]:
        return self.build_parameters(member.parameters, member.is_varargs)

    def build_parameters(self, parameters: List[ParameterDoc], is_varargs: bool) -> List[ParameterModel]:
        """Convert parameter declarations, positions following declaration order.

        Args:
            parameters: Formal parameter declarations
            is_varargs: Whether the last parameter is variadic; its element
                type is then recorded as an array

        Returns:
            One ParameterModel per declaration
        """
        models = []
        last = len(parameters) - 1
        for position, parameter in enumerate(parameters):
            type_name = str(parameter.type)
            if is_varargs and position == last:
                type_name += ARRAY_SUFFIX
            models.append(ParameterModel(
                type=TypeReference.of(type_name),
                name=parameter.name,
                position=position,
                nullable=infer_nullability(parameter.annotations),
            ))
        return models
