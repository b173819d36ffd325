from __future__ import annotations

import json
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class OAuthConfig(BaseModel):
    """Options for the viewer's ``initOAuth`` call.

    Stored on :class:`~swagger_ui_redist.schemas.config.Config` but not part
    of the rendered page yet.
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    realm: Optional[str] = None
    app_name: Optional[str] = None
    scope_separator: Optional[str] = None
    scopes: Optional[List[str]] = None
    additional_query_string_params: Optional[Dict[str, str]] = None
    use_basic_authentication_with_access_code_grant: Optional[bool] = None
    use_pkce_with_authorization_code_grant: Optional[bool] = None

    def to_json(self) -> str:
        """Camel-cased JSON for a hand-written ``ui.initOAuth(...)`` call.

        Not wired into the rendered page: hosts that need OAuth append the
        call themselves.
        """
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = ["OAuthConfig"]
