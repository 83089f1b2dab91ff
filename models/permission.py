"""
Permission model for element hiding rules.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class IdentifiedBy(Enum):
    """DOM lookup used to locate the element(s) a permission applies to"""

    ID = 0
    CLASS_NAME = 1
    SELECTOR = 2
    NAME = 3

    @classmethod
    def parse(cls, value: Any) -> Optional['IdentifiedBy']:
        """Resolve an enum member from a member, its int value or its name.

        Returns None for anything unrecognized.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            key = value.strip().replace('_', '').replace('-', '').lower()
            for member in cls:
                if member.name.replace('_', '').lower() == key:
                    return member
        return None


def _parse_access(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
        return value.strip().lower() == 'true'
    raise ValueError(f"hasAccess must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Permission:
    """A single rule: where it applies, how to find the element, and whether access is granted"""

    resource_name: Optional[str]
    identified_by: Optional[IdentifiedBy]
    identifier: str
    has_access: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Permission':
        if not isinstance(data, Mapping):
            raise ValueError(f"Permission must be an object, got {type(data).__name__}")

        def pick(camel, snake, default=None):
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        identifier = pick('identifier', 'identifier')
        # Missing hasAccess means granted; only explicit denials hide anything
        return cls(
            resource_name=pick('resourceName', 'resource_name'),
            identified_by=IdentifiedBy.parse(pick('identifiedBy', 'identified_by')),
            identifier='' if identifier is None else str(identifier),
            has_access=_parse_access(pick('hasAccess', 'has_access', True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'resourceName': self.resource_name,
            'identifiedBy': self.identified_by.name if self.identified_by else None,
            'identifier': self.identifier,
            'hasAccess': self.has_access,
        }
