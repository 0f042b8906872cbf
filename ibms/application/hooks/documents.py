"""Document hooks — documents, templates, sharing and PDF generation."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookContext, ResourceApi, ResourceHooks
from ibms.application.query import Mutation, QueryResult
from ibms.application.schemas import to_payload


class DocumentHooks(ResourceHooks):
    def __init__(self, ctx: HookContext):
        super().__init__(ctx, entity="documents", label="Document", resource=ResourceApi.rest(ctx.api, "/documents"))
        self.templates = ResourceHooks(
            ctx,
            entity="document-templates",
            label="Template",
            resource=ResourceApi.rest(ctx.api, "/documents/templates"),
            list_stale_time=5 * MINUTE,
        )

    async def use_stats(self, filters: Any = None) -> QueryResult:
        return await self.query(
            self.keys.scoped("stats"),
            lambda: self.api.get("/documents/stats"),
            stale_time=5 * MINUTE,
        )

    def use_upload(self) -> Mutation:
        """Upload is a create with file metadata."""
        return self.use_create()

    def use_share(self) -> Mutation:
        """Variables: ``{"id", "share": DocumentShare | dict}``."""
        def after(_share: Any, variables: dict[str, Any]) -> None:
            self.query_client.invalidate_queries(self.keys.detail(variables["id"]))
            self.invalidate_lists()

        return self.mutation(
            lambda v: self.api.post(f"/documents/{v['id']}/share", to_payload(v["share"])),
            success="Document shared successfully",
            failure="Failed to share document",
            after=after,
        )

    def use_generate_pdf(self) -> Mutation:
        """Variables: ``PdfGenerateRequest | dict``; the new document lands in the lists."""
        return self.mutation(
            lambda request: self.api.post("/documents/generate-pdf", to_payload(request)),
            success="PDF generated successfully",
            failure="Failed to generate PDF",
            after=lambda _doc, _request: self.invalidate_lists(),
        )
