from __future__ import annotations

import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def export_openapi(output_path: Path) -> Path:
    from api.server import app

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(app.openapi(), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path


def main() -> None:
    output_path = export_openapi(PROJECT_ROOT / "contracts" / "openapi.json")
    print(f"Exported OpenAPI schema to {output_path}")


if __name__ == "__main__":
    main()
