"""Asset resource."""

from typing import Any

from contentful_management.constants import HEADER_VERSION
from contentful_management.errors import UnsupportedActionError
from contentful_management.resource.base import BaseResource, format_value
from contentful_management.resource.capability import VERSIONABLE
from contentful_management.resource.file import BaseFile


class Asset(BaseResource):
    """A resource with type "Asset".

    Title, description and file are localized. After creation, a file
    must be processed (``process``) before the asset can be published.

    API documentation:
    https://www.contentful.com/developers/docs/references/content-management-api/#/reference/assets
    """

    resource_type = "Asset"
    resource_kind = "Asset"
    id_parameter = "asset"
    capabilities = VERSIONABLE

    def __init__(
        self,
        title: dict[str, str | None] | None = None,
        description: dict[str, str | None] | None = None,
        file: dict[str, BaseFile | None] | None = None,
    ) -> None:
        super().__init__()
        self._title: dict[str, str | None] = dict(title or {})
        self._description: dict[str, str | None] = dict(description or {})
        self._file: dict[str, BaseFile | None] = dict(file or {})

    def get_title(self, locale: str) -> str | None:
        return self._title.get(locale)

    def set_title(self, locale: str, title: str | None) -> "Asset":
        self._title[locale] = title
        return self

    def get_titles(self) -> dict[str, str | None]:
        return dict(self._title)

    def get_description(self, locale: str) -> str | None:
        return self._description.get(locale)

    def set_description(self, locale: str, description: str | None) -> "Asset":
        self._description[locale] = description
        return self

    def get_descriptions(self) -> dict[str, str | None]:
        return dict(self._description)

    def get_file(self, locale: str) -> BaseFile | None:
        return self._file.get(locale)

    def set_file(self, locale: str, file: BaseFile | None) -> "Asset":
        self._file[locale] = file
        return self

    def get_files(self) -> dict[str, BaseFile | None]:
        return dict(self._file)

    def process(self, locale: str | None = None) -> "Asset":
        """Ask the API to process unprocessed files.

        Processing is asynchronous: the API answers immediately and the
        asset must be fetched again to see the processed file.

        Args:
            locale: Locale to process. Every locale with a file when None.

        Returns:
            The asset itself.

        Raises:
            UnsupportedActionError: If the asset is not attached to a client.
        """
        client = self.client
        if client is None:
            msg = "Asset is not attached to a client; create it first"
            raise UnsupportedActionError(msg)

        locales = [locale] if locale is not None else list(self._file)
        headers = (
            {HEADER_VERSION: str(self.sys.version)}
            if self.sys.version is not None
            else {}
        )
        for file_locale in locales:
            client.request_with_resource(
                self, "PUT", f"/files/{file_locale}/process", headers=headers
            )
        return self

    def serialize_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self._title:
            fields["title"] = dict(self._title)
        if self._description:
            fields["description"] = dict(self._description)
        if self._file:
            fields["file"] = {
                locale: format_value(file) for locale, file in self._file.items()
            }
        return {"fields": fields}
