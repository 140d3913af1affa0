"""Generate bindings partial classes for UXML documents"""

from __future__ import annotations
from pathlib import Path

from ...core.document_asset import UIDocumentAsset, expand_uxml_paths
from ...core.errors import BindgenError
from ...core.generator_service import (
    bindings_file_path,
    generate_bindings,
    registry_for,
)
from ...core.logger import get_logger
from ...core.settings import load_settings


log = get_logger(__name__)


def run(args) -> int:
    """
    Generate ``<Name>.g.cs`` for each UXML document.

    Args:
        args: Command-line arguments with:
            - uxml: UXML files or directories
            - out: Optional output file (single document only)
            - settings: Optional settings file

    Returns:
        Process exit code
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

    registry = registry_for(settings)
    generated = 0
    failed = 0

    for uxml_file in uxml_files:
        try:
            document = UIDocumentAsset.load(uxml_file)
            output_file = (
                Path(args.out) if args.out else bindings_file_path(document, settings)
            )
            generate_bindings(document, output_file, registry)
            generated += 1
        except (BindgenError, OSError) as e:
            log.error(f"Failed to generate bindings for {uxml_file}: {e}")
            failed += 1

    log.info(f"Generated bindings for {generated} document(s)")
    if failed:
        log.warning(f"{failed} document(s) failed")
        return 1
    return 0
