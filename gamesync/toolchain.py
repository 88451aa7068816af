"""
Thin wrappers around the Flutter/Dart toolchain.

Platform detection, application identity renaming and the downstream
build. Every external command goes through run_command so tests can patch
subprocess.run in one place.
"""

import platform
import re
import subprocess
from pathlib import Path
from typing import List, Optional

from .errors import ToolchainError
from .sync.content import AppIdentity
from .ui.reporter import Reporter

PLATFORM_NAMES = {
    "macos": "macOS",
    "linux": "Linux",
    "windows": "Windows",
}

SUPPORTED_PLATFORMS = set(PLATFORM_NAMES)

RENAME_APP_NAME_TARGETS = "android,ios,macos,linux,windows,web"
RENAME_BUNDLE_ID_TARGETS = "android,ios,macos"

GAME_PATH_DEFINE = "SAKI_GAME_PATH"


def detect_platform() -> str:
    """'macos', 'linux', 'windows' or 'unknown'."""
    system = platform.system()
    if system == "Darwin":
        return "macos"
    if system == "Linux":
        return "linux"
    if system == "Windows":
        return "windows"
    return "unknown"


def platform_display_name(name: str) -> str:
    return PLATFORM_NAMES.get(name, "Unknown")


def run_command(args: List[str], cwd: Optional[Path] = None, capture: bool = False) -> subprocess.CompletedProcess:
    """Run a command, raising ToolchainError if it is missing or fails."""
    try:
        return subprocess.run(
            args,
            cwd=str(cwd) if cwd else None,
            check=True,
            capture_output=capture,
            text=True,
        )
    except FileNotFoundError as e:
        raise ToolchainError(f"Command not found: {args[0]}") from e
    except subprocess.CalledProcessError as e:
        raise ToolchainError(f"'{' '.join(args)}' failed with exit code {e.returncode}") from e


def check_flutter(platform_name: str) -> bool:
    """True if flutter is installed and the platform can build desktop apps."""
    try:
        run_command(["flutter", "--version"], capture=True)
    except ToolchainError:
        return False
    return platform_name in SUPPORTED_PLATFORMS


def patch_file(path: Path, pattern: str, replacement: str) -> bool:
    """Substitute the first match of pattern in path. False if the file is missing."""
    if not path.is_file():
        return False
    content = path.read_text(encoding="utf-8")
    path.write_text(re.sub(pattern, lambda _: replacement, content, count=1), encoding="utf-8")
    return True


def set_app_identity(engine_dir: Path, identity: AppIdentity, reporter: Optional[Reporter] = None):
    """
    Rename the engine's application.

    The `rename` package handles the mobile/macOS/web targets; the Linux
    application id and the Windows company name are patched directly.
    """
    reporter = reporter or Reporter()
    engine_dir = Path(engine_dir)

    reporter.step(f"Setting app name: {identity.app_name}")
    run_command(
        ["dart", "run", "rename", "setAppName",
         "--targets", RENAME_APP_NAME_TARGETS, "--value", identity.app_name],
        cwd=engine_dir, capture=True,
    )

    reporter.step(f"Setting bundle id: {identity.bundle_id}")
    run_command(
        ["dart", "run", "rename", "setBundleId",
         "--targets", RENAME_BUNDLE_ID_TARGETS, "--value", identity.bundle_id],
        cwd=engine_dir, capture=True,
    )

    try:
        patch_file(
            engine_dir / "linux" / "CMakeLists.txt",
            r'set\(APPLICATION_ID ".*"\)',
            f'set(APPLICATION_ID "{identity.bundle_id}")',
        )
        company = identity.bundle_id.split(".")[0]
        patch_file(
            engine_dir / "windows" / "runner" / "Runner.rc",
            r'VALUE "CompanyName", ".*"',
            f'VALUE "CompanyName", "{company}"',
        )
    except (OSError, UnicodeDecodeError) as e:
        raise ToolchainError(f"Could not patch platform identity files: {e}") from e


def build_run_args(target: str, game_dir: Path) -> List[str]:
    return ["flutter", "run", "-d", target, f"--dart-define={GAME_PATH_DEFINE}={game_dir}"]


def run_flutter_build(engine_dir: Path, game_dir: Path, target: str, reporter: Optional[Reporter] = None):
    """
    Clean, fetch dependencies, regenerate icons and run the engine.

    target is a flutter device id: 'chrome', 'macos', 'linux' or 'windows'.
    Icon generation failing is only a warning.
    """
    reporter = reporter or Reporter()

    reporter.step("Cleaning Flutter build cache...")
    run_command(["flutter", "clean"], cwd=engine_dir)

    reporter.step("Fetching dependencies...")
    run_command(["flutter", "pub", "get"], cwd=engine_dir)

    reporter.step("Generating app icons...")
    try:
        run_command(["flutter", "pub", "run", "flutter_launcher_icons:main"], cwd=engine_dir)
    except ToolchainError as e:
        reporter.warning(f"Icon generation failed, continuing: {e}")

    reporter.success(f"Launching on {target}...")
    run_command(build_run_args(target, game_dir), cwd=engine_dir)
