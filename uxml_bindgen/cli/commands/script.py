"""Generate behaviour scripts for UXML documents"""

from __future__ import annotations
from pathlib import Path

from ...core.document_asset import UIDocumentAsset, expand_uxml_paths
from ...core.errors import BindgenError
from ...core.generator_service import generate_script, script_file_path
from ...core.logger import get_logger
from ...core.settings import load_settings


log = get_logger(__name__)


def run(args) -> int:
    """
    Generate the user-editable ``<Name>.cs`` for each UXML document.

    Existing scripts are left alone unless ``force`` is set.
    """
    settings = load_settings(Path(args.settings) if args.settings else None)
    if not settings.enabled:
        log.warning("Binding generation is disabled in settings")
        return 0

    uxml_files = expand_uxml_paths(Path(p) for p in args.uxml)
    if not uxml_files:
        log.error("No UXML documents to process")
        return 1

    if args.out and len(uxml_files) > 1:
        log.error("--out can only be used with a single UXML document")
        return 1

    failed = 0
    for uxml_file in uxml_files:
        try:
            document = UIDocumentAsset.load(uxml_file)
            output_file = Path(args.out) if args.out else script_file_path(document)

            if output_file.exists() and not args.force:
                log.warning(
                    f"Script already exists, skipping: {output_file} (use --force to overwrite)"
                )
                continue

            generate_script(document, output_file)
        except (BindgenError, OSError) as e:
            log.error(f"Failed to generate script for {uxml_file}: {e}")
            failed += 1

    return 1 if failed else 0
