"""
Loads resolved permission records from a JSON file.
"""
import json
import logging
from collections import OrderedDict
from typing import Dict, Iterable, List

from models.permission import Permission

logger = logging.getLogger(__name__)


class PermissionFileError(ValueError):
  """Raised when a permissions file cannot be parsed into permission records"""


def load_permissions(path) -> List[Permission]:
  """Read permissions from path.

  The file holds either a JSON list of permission objects or an object with a
  "permissions" list. A missing file yields no permissions.
  """
  logger.info(f"Loading permissions from {path}")
  try:
    with open(path, 'r', encoding='utf-8') as f:
      data = json.load(f)
  except FileNotFoundError:
    logger.warning(f"Permissions file not found: {path}, no elements will be hidden")
    return []
  except json.JSONDecodeError as e:
    raise PermissionFileError(f"Invalid JSON in permissions file {path}: {e}") from e
  except UnicodeDecodeError as e:
    raise PermissionFileError(f"Permissions file {path} is not valid UTF-8: {e}") from e
  except OSError as e:
    raise PermissionFileError(f"Could not read permissions file {path}: {e}") from e

  if isinstance(data, dict):
    data = data.get('permissions')
  if not isinstance(data, list):
    raise PermissionFileError(f"Permissions file {path} must contain a list of permissions")

  permissions = []
  for index, item in enumerate(data):
    try:
      permissions.append(Permission.from_dict(item))
    except ValueError as e:
      raise PermissionFileError(f"Invalid permission at index {index} in {path}: {e}") from e

  denied = sum(1 for p in permissions if not p.has_access)
  logger.info(f"Loaded {len(permissions)} permissions ({denied} denied) from {path}")
  return permissions


def group_by_resource(permissions: Iterable[Permission]) -> Dict[str, List[Permission]]:
  """Group permissions by resource name; global rules go under ''"""
  grouped: Dict[str, List[Permission]] = OrderedDict()
  for p in permissions:
    grouped.setdefault(p.resource_name or '', []).append(p)
  return grouped
