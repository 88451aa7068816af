"""
The sync pipeline: mirror the game project, then regenerate pubspec.yaml.

Steps run in order and the first failure stops the rest. Nothing is
retried; every step is idempotent, so fixing the cause and running the
whole pipeline again reaches the same end state.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from .config import LauncherPaths
from .errors import GameSyncError
from .manifest.generators import bundled_font
from .manifest.pubspec import update_pubspec_assets, update_pubspec_fonts
from .sync.content import ContentProject
from .sync.mirror import SyncReport, sync_game_assets
from .ui.reporter import Reporter

STEP_SYNC = "sync"
STEP_ASSETS = "assets"
STEP_FONTS = "fonts"


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""
    ok: bool = True
    failed_step: Optional[str] = None
    error: Optional[GameSyncError] = None
    completed_steps: List[str] = field(default_factory=list)
    warnings: List[Union[Warning, str]] = field(default_factory=list)
    sync_report: Optional[SyncReport] = None


def build_steps(
    paths: LauncherPaths,
    project: ContentProject,
    reporter: Reporter,
    result: PipelineResult,
) -> List[Tuple[str, Callable[[], None]]]:
    config = paths.config
    base_font = bundled_font(
        config.bundled_font_family,
        config.bundled_font_asset,
        config.bundled_font_weight,
    )

    def sync_step():
        result.sync_report = sync_game_assets(
            paths.engine_assets_dir, project, paths.root, reporter
        )

    def assets_step():
        update_pubspec_assets(paths.engine_dir, reporter)

    def fonts_step():
        update_pubspec_fonts(paths.engine_dir, project.root, reporter, base_font)

    return [
        (STEP_SYNC, sync_step),
        (STEP_ASSETS, assets_step),
        (STEP_FONTS, fonts_step),
    ]


def run_pipeline(
    paths: LauncherPaths,
    project: ContentProject,
    reporter: Optional[Reporter] = None,
) -> PipelineResult:
    """
    Mirror project into the engine and regenerate its pubspec sections.

    Returns a PipelineResult; fatal errors are captured in it, not raised.
    """
    reporter = reporter or Reporter()
    result = PipelineResult()
    warnings_before = len(reporter.warnings)

    for name, step in build_steps(paths, project, reporter, result):
        try:
            step()
        except GameSyncError as e:
            reporter.error(str(e))
            result.ok = False
            result.failed_step = name
            result.error = e
            break
        result.completed_steps.append(name)

    result.warnings = reporter.warnings[warnings_before:]
    return result
