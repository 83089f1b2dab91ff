"""
Script injection for hiding HTML elements a user does not have access to.

The generated script only hides elements (visibility: hidden). The backend
still enforces permissions; this is a UI convenience.

Identifiers are interpolated into the script verbatim. Never build permission
records from untrusted input without validating the identifier first.
"""

import logging
from typing import List, Optional, Sequence

from markupsafe import Markup

from models.permission import IdentifiedBy, Permission

logger = logging.getLogger(__name__)

SCRIPT_OPEN = "<script>\n"
SCRIPT_CLOSE = "</script>"

# One line per strategy; braces doubled for str.format
HIDE_TEMPLATES = {
  IdentifiedBy.ID: "document.getElementById('{identifier}').style.visibility = 'hidden';\n",
  IdentifiedBy.CLASS_NAME: (
    "Array.prototype.forEach.call(document.getElementsByClassName('{identifier}'), "
    "element => {{element.style.visibility = 'hidden'}});\n"
  ),
  IdentifiedBy.SELECTOR: (
    "Array.prototype.forEach.call(document.querySelectorAll('{identifier}'), "
    "element => {{element.style.visibility = 'hidden'}});\n"
  ),
  IdentifiedBy.NAME: (
    "Array.prototype.forEach.call(document.getElementsByName('{identifier}'), "
    "element => {{element.style.visibility = 'hidden'}});\n"
  ),
}


class PermissionsInjector:
  """Builds script blocks that hide the elements denied by a list of permissions"""

  def __init__(self, permission_list: Sequence[Permission]):
    # Caller owns the list; it is read on every call, never copied or mutated
    self._permission_list = permission_list

  @property
  def permissions(self) -> Sequence[Permission]:
    return self._permission_list

  def inject_as_javascript(self, resource_name: Optional[str] = None) -> str:
    """Return a <script> block hiding every denied element for the resource.

    An empty or missing resource_name matches every resource. Returns an
    empty string when nothing needs hiding.
    """
    lines = [self._hide_element_js(p) for p in self.filter_permissions(resource_name)]
    body = ''.join(lines)
    if not body:
      return ''
    return SCRIPT_OPEN + body + SCRIPT_CLOSE

  def inject_as_markup(self, resource_name: Optional[str] = None) -> Markup:
    """Same as inject_as_javascript, marked safe for Jinja templates"""
    return Markup(self.inject_as_javascript(resource_name))

  def filter_permissions(self, resource_name: Optional[str] = None) -> List[Permission]:
    """Denied permissions that apply to resource_name, in input order"""
    return [
      p for p in self._permission_list
      if not p.has_access and (not resource_name or p.resource_name == resource_name)
    ]

  def inject_into_middleware_pipeline(self, context) -> None:
    """NOT SUPPORTED.

    Injecting from the request pipeline would mean parsing every response
    body to remove the elements, which costs too much per request. Callers
    render inject_as_markup into their templates instead.
    """
    raise NotImplementedError("Method 'inject_into_middleware_pipeline' not implemented.")

  @staticmethod
  def _hide_element_js(permission: Permission) -> str:
    template = HIDE_TEMPLATES.get(permission.identified_by)
    if template is None:
      # Unknown strategies are skipped, not rejected
      logger.debug(f"Skipping permission with unknown identified_by: {permission.identified_by!r}")
      return ''
    return template.format(identifier=permission.identifier)
