from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.extraction import extract_resume, to_cover_letter_fields, to_resume_preview  # noqa: E402
from app.parsing.parse import decode_document  # noqa: E402
from app.parsing.upload_security import extension_from_filename  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract structured fields from a résumé file.")
    parser.add_argument("path", help="Path to a .txt, .pdf, .docx or .doc résumé")
    view = parser.add_mutually_exclusive_group()
    view.add_argument("--preview", action="store_true", help="Print the résumé preview instead of raw fields.")
    view.add_argument("--cover-letter", action="store_true", help="Print the cover-letter field projection.")
    parser.add_argument("--out", default="", help="Write JSON here instead of stdout")
    args = parser.parse_args()

    path = Path(args.path)
    source_type = extension_from_filename(path.name)
    if source_type not in {"txt", "pdf", "docx", "doc"}:
        parser.error(f"unsupported file extension '{path.suffix or path.name}'")

    decoded = decode_document(filename=path.name, source_type=source_type, content=path.read_bytes())
    for warning in decoded.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    if not decoded.success:
        raise SystemExit(f"Could not decode {path.name}: {decoded.error}")

    parsed = extract_resume(decoded.text)
    if args.preview:
        result = to_resume_preview(parsed)
    elif args.cover_letter:
        result = to_cover_letter_fields(parsed, date.today().year)
    else:
        result = parsed

    payload = json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)


if __name__ == "__main__":
    main()
