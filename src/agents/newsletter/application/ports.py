from __future__ import annotations

from typing import Protocol


class ResearchClientLike(Protocol):
    async def research_company(self, company_name: str) -> object: ...


class ChatModelFactory(Protocol):
    def __call__(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int | None,
    ) -> object: ...
