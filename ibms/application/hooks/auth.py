"""Auth hooks — current user, login and logout."""

from typing import Any

from ibms.application.hooks.base import DETAIL_STALE_TIME, HookBase, HookContext, error_message, unwrap
from ibms.application.query import Mutation, QueryKeys, QueryResult
from ibms.domain.entities import ApiResponse


class AuthHooks(HookBase):
    """Session hooks over the generic verbs, so they work against mock and live backends alike."""

    def __init__(self, ctx: HookContext):
        super().__init__(ctx, QueryKeys("auth"))

    @property
    def user_key(self) -> tuple[str, str]:
        return ("auth", "user")

    async def use_current_user(self) -> QueryResult:
        """Enabled only while a token is stored."""
        return await self.query(
            self.user_key,
            lambda: self.api.get("/auth/me"),
            stale_time=DETAIL_STALE_TIME,
            enabled=bool(self.api.token),
        )

    async def _login(self, variables: dict[str, Any]) -> ApiResponse:
        if variables.get("tenant"):
            self.api.set_tenant(variables["tenant"])
        response = await self.api.post(
            "/auth/login",
            {"email": variables["email"], "password": variables["password"], "tenant": self.api.tenant},
        )
        data = unwrap(response)
        if isinstance(data, dict) and data.get("token"):
            self.api.set_token(data["token"])
        return response

    def use_login(self) -> Mutation:
        """Variables: ``{"email", "password", "tenant"?}``."""

        def after(data: Any, _variables: Any) -> None:
            if isinstance(data, dict) and data.get("user") is not None:
                self.query_client.set_query_data(self.user_key, data["user"])

        return self.mutation(self._login, success="Welcome back!", failure="Login failed", after=after)

    def use_logout(self) -> Mutation:
        """Token and cache are cleared whether or not the server call succeeds."""
        notifier = self._ctx.notifier

        async def run(_variables: Any) -> Any:
            try:
                response = await self.api.post("/auth/logout")
            finally:
                self.api.clear_token()
                self.query_client.clear()
            return unwrap(response)

        return Mutation(
            run,
            on_success=lambda _data, _v: notifier.success("Logged out successfully"),
            on_error=lambda exc, _v: notifier.error(error_message(exc, "Logout failed")),
        )
