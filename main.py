import argparse
import asyncio
import sys
from pathlib import Path

from src.agents.newsletter.application import build_newsletter_orchestrator
from src.agents.newsletter.domain.errors import NewsletterError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write a newsletter article about a company")
    parser.add_argument("company_name", nargs="?", help="Company to research")
    parser.add_argument("--currency", choices=["inr", "usd"], default=None)
    parser.add_argument("--html-out", type=Path, default=None)
    return parser.parse_args(argv)


async def run(company_name: str, currency: str | None, html_out: Path | None) -> int:
    orchestrator = build_newsletter_orchestrator()
    try:
        output = await orchestrator.run(company_name=company_name, currency=currency)
    except NewsletterError as exc:
        print(f"\n>>> Newsletter generation failed: {exc}", file=sys.stderr)
        return 1

    if output.raw_api_response:
        print(f"\n>>> Research failed: {output.raw_api_response}")
        return 0

    print(f"\n{output.story}\n")
    if html_out is not None and output.html_content:
        html_out.write_text(output.html_content, encoding="utf-8")
        print(f">>> HTML written to {html_out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    company_name = args.company_name or input(
        "\nWhich company should the newsletter cover?\n> "
    )
    company_name = company_name.strip()
    if not company_name:
        print(">>> No company name given.", file=sys.stderr)
        return 2

    print(f"\nResearching: {company_name}")
    return asyncio.run(run(company_name, args.currency, args.html_out))


if __name__ == "__main__":
    raise SystemExit(main())
