"""
Form factory.

Single entry point from a role name to a complete RegistrationForm.
The factory does no I/O: it derives each form from the injected
catalog, section composer and schema builder.
"""

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from regform.engine.catalog import FieldCatalog, default_catalog
from regform.engine.schema_builder import SchemaBuilder
from regform.engine.sections import SectionComposer
from regform.models.field_definitions import FormDefinitionError, UserRole
from regform.models.form import RegistrationForm, SubmitHandler
from regform.models.validation_result import SubmissionResult

logger = logging.getLogger("regform")

FORM_METADATA: dict[str, dict[str, str]] = {
    UserRole.USER.value: {
        "id": "user_registration",
        "title": "User Registration",
        "description": "Create your account to start planning your perfect wedding",
        "display_name": "User",
    },
    UserRole.VENDOR.value: {
        "id": "vendor_registration",
        "title": "Vendor Registration",
        "description": "Complete your vendor profile to start receiving bookings",
        "display_name": "Vendor",
    },
    UserRole.WEDDING_PLANNER.value: {
        "id": "wedding_planner_registration",
        "title": "Wedding Planner Registration",
        "description": "Complete your wedding planner profile to start helping couples",
        "display_name": "Wedding planner",
    },
}


@dataclass(frozen=True)
class RegistrationSubmitHandler:
    """
    Default submit handler.

    Account creation belongs to the API layer; this handler only logs
    the accepted payload and acknowledges it.
    """

    role: str

    async def __call__(self, payload: dict[str, Any]) -> SubmissionResult:
        display_name = FORM_METADATA[self.role]["display_name"]
        logger.info(f"{display_name} registration received with fields: {sorted(payload)}")
        return SubmissionResult(
            success=True,
            message=f"{display_name} registration successful",
            data=payload,
        )


class FormFactory:
    """
    Maps a role to its registration form.

    Usage:
        factory = FormFactory()
        form = factory.create_form("vendor")

        # Substitute collaborators for tests or other deployments
        factory = FormFactory(catalog=my_catalog)
    """

    def __init__(
        self,
        catalog: FieldCatalog | None = None,
        composer: SectionComposer | None = None,
        schema_builder: SchemaBuilder | None = None,
        submit_handlers: Mapping[str, SubmitHandler] | None = None,
    ):
        self.catalog = catalog or default_catalog()
        self.composer = composer or SectionComposer(self.catalog)
        self.schema_builder = schema_builder or SchemaBuilder(self.catalog)
        self.submit_handlers = dict(submit_handlers or {})

    def create_form(self, role: str) -> RegistrationForm:
        """
        Create the registration form for a role.

        "vendor" and "wedding_planner" get their dedicated forms; any
        other value, unknown strings included, gets the user form.
        """
        resolved = self.catalog.resolve_role(role)
        if resolved not in FORM_METADATA:
            raise FormDefinitionError(f"No form metadata for role '{resolved}'")
        metadata = FORM_METADATA[resolved]

        if resolved != role:
            logger.debug(f"Role {role!r} has no dedicated form, using '{resolved}'")

        form = RegistrationForm(
            id=metadata["id"],
            role=resolved,
            title=metadata["title"],
            description=metadata["description"],
            sections=self.composer.compose_sections(resolved),
            validation_schema=self.schema_builder.build_schema(resolved),
            submit_handler=self.submit_handlers.get(resolved) or RegistrationSubmitHandler(resolved),
        )
        logger.debug(f"Created form '{form.id}' with {len(form.fields)} fields")
        return form


@functools.lru_cache(maxsize=1)
def default_factory() -> FormFactory:
    """Get the process-wide factory over the default catalog."""
    return FormFactory()


def create_form(role: str) -> RegistrationForm:
    """
    Convenience function to create a registration form.

    Example:
        >>> from regform import create_form
        >>> form = create_form("wedding_planner")
        >>> form.title
        'Wedding Planner Registration'
    """
    return default_factory().create_form(role)
