"""Remove generated bindings"""

from __future__ import annotations
from pathlib import Path

from ...core.document_asset import UIDocumentAsset, expand_uxml_paths
from ...core.errors import BindgenError
from ...core.generator_service import clear_bindings
from ...core.logger import get_logger
from ...core.settings import load_settings


log = get_logger(__name__)


def run(args) -> int:
    settings = load_settings(Path(args.settings) if args.settings else None)
    if not settings.enabled:
        log.warning("Binding generation is disabled in settings")
        return 0

    failed = 0
    cleared = 0
    for uxml_file in expand_uxml_paths(Path(p) for p in args.uxml):
        try:
            document = UIDocumentAsset.load(uxml_file)
            if clear_bindings(document, settings):
                cleared += 1
        except (BindgenError, OSError) as e:
            log.error(f"Failed to clear bindings for {uxml_file}: {e}")
            failed += 1

    log.info(f"Cleared {cleared} generated file(s)")
    return 1 if failed else 0
