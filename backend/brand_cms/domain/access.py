"""
Role permissions and module visibility resolution.

Single source of truth for "may this actor see / do X". The sidebar, the
dashboard quick actions and the page lifecycle all consume
resolve_module_access() instead of re-implementing the precedence rule.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Mapping, Optional


class Role:
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    SUB_ADMIN = "sub_admin"

    ALL = (SUPER_ADMIN, ADMIN, SUB_ADMIN)


# The only role allowed to mutate the shared visibility map
ELEVATED_ROLE = Role.SUPER_ADMIN


class Module:
    DASHBOARD = "dashboard"
    NAVIGATION = "navigation"
    HEADER = "header"
    FOOTER = "footer"
    HOME = "home"
    ABOUT = "about"
    CONTACT = "contact"
    CAREERS = "careers"
    PRODUCTS = "products"
    BRAND_PAGES = "brand-pages"
    FORM_SUBMISSIONS = "form-submissions"
    ENQUIRY_FORM = "enquiry-form"
    PRIVACY_POLICY = "privacy-policy"
    COOKIES_POLICY = "cookies-policy"
    MIGRATION = "migration"
    USER_MANAGEMENT = "user-management"
    AUDIT_LOGS = "audit-logs"

    ALL = (
        DASHBOARD, NAVIGATION, HEADER, FOOTER, HOME, ABOUT, CONTACT, CAREERS,
        PRODUCTS, BRAND_PAGES, FORM_SUBMISSIONS, ENQUIRY_FORM, PRIVACY_POLICY,
        COOKIES_POLICY, MIGRATION, USER_MANAGEMENT, AUDIT_LOGS,
    )


ROLE_BASE_PATH: Dict[str, str] = {
    Role.SUPER_ADMIN: "/superadmin",
    Role.ADMIN: "/admin",
    Role.SUB_ADMIN: "/subadmin",
}


@dataclass(frozen=True)
class Actor:
    id: Optional[str]
    role: str


@dataclass(frozen=True)
class RolePermissions:
    allowed_modules: FrozenSet[str]
    can_delete: bool
    can_manage_users: bool


ROLE_PERMISSIONS: Dict[str, RolePermissions] = {
    Role.SUPER_ADMIN: RolePermissions(
        allowed_modules=frozenset(Module.ALL),
        can_delete=True,
        can_manage_users=True,
    ),
    Role.ADMIN: RolePermissions(
        allowed_modules=frozenset(Module.ALL) - {Module.MIGRATION, Module.USER_MANAGEMENT},
        can_delete=True,
        can_manage_users=False,
    ),
    Role.SUB_ADMIN: RolePermissions(
        allowed_modules=frozenset({
            Module.DASHBOARD,
            Module.PRODUCTS,
            Module.BRAND_PAGES,
            Module.FORM_SUBMISSIONS,
            Module.HOME,
            Module.ABOUT,
            Module.PRIVACY_POLICY,
            Module.COOKIES_POLICY,
        }),
        can_delete=True,
        can_manage_users=False,
    ),
}

_ROLE_ALIASES: Dict[str, str] = {
    "superadmin": Role.SUPER_ADMIN,
    "super admin": Role.SUPER_ADMIN,
    "subadmin": Role.SUB_ADMIN,
    "sub admin": Role.SUB_ADMIN,
}

# (module, title) pairs shown as dashboard cards, in display order
QUICK_ACTIONS = (
    (Module.NAVIGATION, "Navigation Management"),
    (Module.HEADER, "Header Styling"),
    (Module.HOME, "Home Management"),
    (Module.ABOUT, "About Management"),
    (Module.CONTACT, "Contact Management"),
    (Module.CAREERS, "Careers Management"),
    (Module.PRODUCTS, "Product Management"),
    (Module.BRAND_PAGES, "Brand Pages Management"),
    (Module.FOOTER, "Footer Management"),
    (Module.ENQUIRY_FORM, "Enquiry Form Management"),
    (Module.USER_MANAGEMENT, "User Management"),
    (Module.AUDIT_LOGS, "Audit Logs"),
)


def normalize_role(role: Optional[str]) -> str:
    """
    Map a stored role string onto the closed role set.

    Unknown or empty values fall back to the least privileged role.
    """
    if not role:
        return Role.SUB_ADMIN

    normalized = str(role).strip().lower()
    if normalized in ROLE_PERMISSIONS:
        return normalized

    return _ROLE_ALIASES.get(normalized, Role.SUB_ADMIN)


def base_path_for_role(role: Optional[str]) -> str:
    return ROLE_BASE_PATH.get(role or "", ROLE_BASE_PATH[Role.SUB_ADMIN])


def permissions_for(role: str) -> Optional[RolePermissions]:
    return ROLE_PERMISSIONS.get(role)


def is_module_allowed(role: str, module_id: str) -> bool:
    config = permissions_for(role)
    if config is None:
        return False
    return module_id in config.allowed_modules


def resolve_module_access(
    role: str,
    module_id: str,
    visibility: Mapping[str, bool],
) -> bool:
    """
    Two-tier module access resolution.

    - Static role permission is a ceiling that overrides never exceed.
    - The elevated role hides a module only when the map says False.
    - Other roles inherit an override once one is recorded and otherwise
      keep their static allowance.
    """
    if module_id == Module.DASHBOARD:
        return True

    if not is_module_allowed(role, module_id):
        return False

    if role == ELEVATED_ROLE:
        return visibility.get(module_id) is not False

    if module_id in visibility:
        return visibility[module_id] is not False

    return True


def visible_modules(role: str, visibility: Mapping[str, bool]) -> List[str]:
    return [
        module_id
        for module_id in Module.ALL
        if resolve_module_access(role, module_id, visibility)
    ]


def quick_actions(role: str, visibility: Mapping[str, bool]) -> List[dict]:
    base_path = base_path_for_role(role)
    return [
        {"id": module_id, "title": title, "path": f"{base_path}/{module_id}"}
        for module_id, title in QUICK_ACTIONS
        if resolve_module_access(role, module_id, visibility)
    ]


def can_delete(role: str) -> bool:
    config = permissions_for(role)
    return bool(config and config.can_delete)


def can_manage_users(role: str) -> bool:
    config = permissions_for(role)
    return bool(config and config.can_manage_users)


def can_create(role: str, visibility: Mapping[str, bool]) -> bool:
    # Creating brand pages follows access to the brand pages module itself
    return resolve_module_access(role, Module.BRAND_PAGES, visibility)


def can_manage_visibility(role: str) -> bool:
    return role == ELEVATED_ROLE
