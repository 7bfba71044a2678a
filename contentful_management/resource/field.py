"""Content type field definitions."""

from typing import Any, ClassVar

from contentful_management.errors import ResourceValidationError
from contentful_management.resource.validation import BaseValidation


VALID_LINK_TYPES = ("Asset", "Entry")
VALID_ARRAY_ITEM_TYPES = ("Symbol", "Link")


class BaseField:
    """A field of a content type.

    Validations are checked against the field type when added, so an
    invalid combination fails before anything is sent to the API.
    """

    field_type: ClassVar[str]

    def __init__(
        self,
        id: str,  # noqa: A002
        name: str,
        required: bool = False,
        localized: bool = False,
        disabled: bool = False,
        omitted: bool = False,
        validations: list[BaseValidation] | None = None,
    ) -> None:
        self.id = id
        self.name = name
        self.required = required
        self.localized = localized
        self.disabled = disabled
        self.omitted = omitted
        self._validations: list[BaseValidation] = []
        for validation in validations or []:
            self.add_validation(validation)

    @property
    def type(self) -> str:
        return self.field_type

    @property
    def validations(self) -> list[BaseValidation]:
        return list(self._validations)

    def add_validation(self, validation: BaseValidation) -> "BaseField":
        """Attach a validation.

        Raises:
            ResourceValidationError: If the validation does not apply to
                this field type.
        """
        if not validation.applies_to(self.field_type):
            msg = (
                f"{type(validation).__name__} cannot be used on fields of type "
                f"{self.field_type}; valid types are "
                f"{', '.join(validation.valid_field_types)}"
            )
            raise ResourceValidationError(msg)
        self._validations.append(validation)
        return self

    def set_validations(self, validations: list[BaseValidation]) -> "BaseField":
        self._validations = []
        for validation in validations:
            self.add_validation(validation)
        return self

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.field_type,
            "required": self.required,
            "localized": self.localized,
            "disabled": self.disabled,
            "omitted": self.omitted,
        }
        if self._validations:
            data["validations"] = [v.to_dict() for v in self._validations]
        return data

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


class SymbolField(BaseField):
    field_type = "Symbol"


class TextField(BaseField):
    field_type = "Text"


class RichTextField(BaseField):
    field_type = "RichText"


class IntegerField(BaseField):
    field_type = "Integer"


class NumberField(BaseField):
    field_type = "Number"


class DateField(BaseField):
    field_type = "Date"


class BooleanField(BaseField):
    field_type = "Boolean"


class LocationField(BaseField):
    field_type = "Location"


class ObjectField(BaseField):
    field_type = "Object"


class LinkField(BaseField):
    """Field referencing an Entry or an Asset."""

    field_type = "Link"

    def __init__(
        self,
        id: str,  # noqa: A002
        name: str,
        link_type: str,
        **options: Any,
    ) -> None:
        self._link_type = _check_link_type(link_type)
        super().__init__(id, name, **options)

    @property
    def link_type(self) -> str:
        return self._link_type

    @link_type.setter
    def link_type(self, link_type: str) -> None:
        self._link_type = _check_link_type(link_type)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["linkType"] = self._link_type
        return data


class ArrayField(BaseField):
    """List of symbols or links.

    Validations on the field itself apply to the list (e.g. size);
    ``items_validations`` apply to each item.
    """

    field_type = "Array"

    def __init__(
        self,
        id: str,  # noqa: A002
        name: str,
        items_type: str,
        items_link_type: str | None = None,
        items_validations: list[BaseValidation] | None = None,
        **options: Any,
    ) -> None:
        if items_type not in VALID_ARRAY_ITEM_TYPES:
            msg = (
                f'Invalid items type "{items_type}". '
                f"Valid values are {', '.join(VALID_ARRAY_ITEM_TYPES)}."
            )
            raise ResourceValidationError(msg)
        if items_type == "Link":
            if items_link_type is None:
                msg = "Arrays of links need an items link type"
                raise ResourceValidationError(msg)
            _check_link_type(items_link_type)
        self.items_type = items_type
        self.items_link_type = items_link_type
        self._items_validations: list[BaseValidation] = []
        super().__init__(id, name, **options)
        for validation in items_validations or []:
            self.add_items_validation(validation)

    @property
    def items_validations(self) -> list[BaseValidation]:
        return list(self._items_validations)

    def add_items_validation(self, validation: BaseValidation) -> "ArrayField":
        """Attach a validation applied to each item.

        Raises:
            ResourceValidationError: If the validation does not apply to
                the item type.
        """
        if not validation.applies_to(self.items_type):
            msg = (
                f"{type(validation).__name__} cannot be used on array items of "
                f"type {self.items_type}"
            )
            raise ResourceValidationError(msg)
        self._items_validations.append(validation)
        return self

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        items: dict[str, Any] = {"type": self.items_type}
        if self.items_link_type is not None:
            items["linkType"] = self.items_link_type
        items["validations"] = [v.to_dict() for v in self._items_validations]
        data["items"] = items
        return data


def _check_link_type(link_type: str) -> str:
    if link_type not in VALID_LINK_TYPES:
        msg = (
            f'Invalid link type "{link_type}". '
            f"Valid values are {', '.join(VALID_LINK_TYPES)}."
        )
        raise ResourceValidationError(msg)
    return link_type


FIELD_TYPES: dict[str, type[BaseField]] = {
    cls.field_type: cls
    for cls in (
        SymbolField,
        TextField,
        RichTextField,
        IntegerField,
        NumberField,
        DateField,
        BooleanField,
        LocationField,
        ObjectField,
        LinkField,
        ArrayField,
    )
}
