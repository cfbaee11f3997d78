"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="landcover-pipeline",
        description="Normalize field-survey land-cover submissions for validation",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings YAML (country, kobo url/asset, store paths)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # transform
    transform_parser = subparsers.add_parser("transform", help="Transform submissions into flat rows")
    transform_parser.add_argument(
        "--country",
        type=str,
        default=None,
        help="Country form profile (GTM, HND, TUN)",
    )
    transform_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read the ingestion payload from a JSON file (default: fetch from Kobo)",
    )
    transform_parser.add_argument(
        "--asset",
        type=str,
        default=None,
        help="Kobo asset uid to fetch when --input is not given",
    )
    transform_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write rows as JSON to file (default: stdout)",
    )
    transform_parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Also write rows as CSV in sheet column order",
    )
    transform_parser.add_argument(
        "--store",
        type=Path,
        default=None,
        metavar="DB_PATH",
        help="Append rows to the SQLite record store at given path",
    )

    # store
    store_parser = subparsers.add_parser("store", help="Query the record store")
    store_parser.add_argument(
        "action",
        choices=["list", "count"],
        help="List rows or show count",
    )
    store_parser.add_argument("--db", type=Path, default=None, help="Path to SQLite database")
    store_parser.add_argument(
        "--status",
        type=str,
        default=None,
        help="Filter by validation status (PENDING, VALIDATED, CORRECTED, NEEDS_REVIEW)",
    )
    store_parser.add_argument("--country", type=str, default=None, help="Filter by country code")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Record a reviewer verdict on a stored row")
    validate_parser.add_argument("--db", type=Path, default=None, help="Path to SQLite database")
    locator = validate_parser.add_mutually_exclusive_group(required=True)
    locator.add_argument("--row", type=int, help="Row id")
    locator.add_argument("--uuid", type=str, help="Submission uuid")
    validate_parser.add_argument(
        "--verdict",
        required=True,
        choices=["correct", "incorrect", "unclear"],
    )
    validate_parser.add_argument("--validator", required=True, help="Reviewer name")
    validate_parser.add_argument("--corrected", default="", help="Corrected classification (for incorrect)")
    validate_parser.add_argument("--crop", default="", help="Main crop type")
    validate_parser.add_argument("--comments", default="", help="Reviewer comments")

    # crops
    crops_parser = subparsers.add_parser("crops", help="Show the crop vocabulary for a country")
    crops_parser.add_argument("--country", type=str, required=True)
    crops_parser.add_argument("--crops-file", type=Path, default=None, help="NDJSON crop vocabulary")

    # countries
    subparsers.add_parser("countries", help="List supported country profiles")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "transform":
        _run_transform(args)
    elif args.command == "store":
        _run_store(args)
    elif args.command == "validate":
        _run_validate(args)
    elif args.command == "crops":
        _run_crops(args)
    elif args.command == "countries":
        _run_countries(args)
    else:
        parser.print_help()


def _load_settings(args: argparse.Namespace):
    from landcover_pipeline.config import PipelineSettings

    settings = PipelineSettings.from_yaml(args.config) if args.config else PipelineSettings()
    return settings.with_env()


def _run_transform(args: argparse.Namespace) -> None:
    """Run transform command."""
    from landcover_pipeline.pipeline import run_transform
    from landcover_pipeline.store import RecordStore, write_csv

    settings = _load_settings(args)
    country = args.country or settings.country
    if not country:
        raise SystemExit("A country is required: pass --country or set it in --config.")

    if args.input:
        try:
            payload = json.loads(args.input.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SystemExit(f"Invalid JSON in {args.input}: {e}")
    else:
        from landcover_pipeline.sources import KoboClient

        asset = args.asset or settings.asset_uid
        if not asset:
            raise SystemExit("Nothing to transform: pass --input or a Kobo --asset.")
        client = KoboClient(settings.kobo_url, token=settings.kobo_token, page_size=settings.page_size)
        payload = client.fetch_submissions(asset)

    store = RecordStore(args.store) if args.store is not None else None
    try:
        records = run_transform(payload, country, store=store)
    except ValueError as e:
        raise SystemExit(str(e))

    if args.csv:
        write_csv(records, args.csv)
        print(f"Wrote {len(records)} rows to {args.csv}", file=sys.stderr)

    output = json.dumps([r.model_dump(mode="json") for r in records], indent=2, default=str)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(records)} rows to {args.output}", file=sys.stderr)
    else:
        print(output)


def _run_store(args: argparse.Namespace) -> None:
    """Run store command."""
    from landcover_pipeline.store import RecordStore

    store = RecordStore(args.db or _load_settings(args).db_path)
    if args.country:
        rows = store.get_by_country(args.country)
        if args.status:
            rows = [r for r in rows if r.record.validation_status == args.status]
    elif args.status:
        rows = store.get_by_status(args.status)
    else:
        rows = store.get_all()

    if args.action == "list":
        output = json.dumps(
            [{"row_id": r.row_id, **r.record.model_dump(mode="json")} for r in rows],
            indent=2,
            default=str,
        )
        print(output)
    elif args.action == "count":
        print(len(rows))


def _run_validate(args: argparse.Namespace) -> None:
    """Run validate command."""
    from landcover_pipeline.store import RecordStore
    from landcover_pipeline.validation import VerdictError, apply_verdict

    store = RecordStore(args.db or _load_settings(args).db_path)
    stored = store.get_row(args.row) if args.row is not None else store.find_by_uuid(args.uuid)
    if stored is None:
        raise SystemExit(f"Record not found: {args.row if args.row is not None else args.uuid}")

    try:
        update = apply_verdict(
            args.verdict,
            land_cover_types=stored.record.land_cover_types,
            validator_name=args.validator,
            corrected_classification=args.corrected,
            main_crop_type=args.crop,
            comments=args.comments,
        )
    except VerdictError as e:
        raise SystemExit(str(e))

    record = store.update_validation(stored.row_id, update)
    print(f"Saved row {stored.row_id}: {record.validation_status if record else update.validation_status}")


def _run_crops(args: argparse.Namespace) -> None:
    """Run crops command."""
    from landcover_pipeline.crops import crops_for, load_crops

    path = args.crops_file or _load_settings(args).crops_path
    for crop in crops_for(load_crops(path), args.country):
        print(crop)


def _run_countries(args: argparse.Namespace) -> None:
    """Run countries command."""
    from landcover_pipeline.countries.registry import CountryRegistry

    for code in CountryRegistry.available_countries():
        profile = CountryRegistry.profile(code)
        modes = [m for m, layout in (("array", profile.array), ("flat", profile.flat)) if layout]
        print(f"{code}\t{profile.name}\t{'+'.join(modes)}")


if __name__ == "__main__":
    main()
