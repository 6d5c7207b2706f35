"""Init steps for a new Anvil Connect deployment.

Each step takes the shared InitContext, checks whether its artifact
already exists, and either skips with an "already initialized" line
or creates it. Existence of the destination path is the only check;
existing content is never inspected or rewritten.
"""

from __future__ import annotations

import json
import shutil
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel

from anvil.models.project import PackageManifest, development_config, production_config
from anvil.scaffold.errors import InitAborted, InitError

if TYPE_CHECKING:
    from anvil.scaffold.pipeline import InitContext

NON_EMPTY_PROMPT = "This is not an empty directory. Are you sure you want to proceed?"

# Bundled templates to copy: (template_name, output_path)
_TEMPLATE_MAP: list[tuple[str, str]] = [
    ("server.js", "server.js"),
    ("views", "views"),
    ("public", "public"),
    ("gitignore", ".gitignore"),
]


class StepOutcome(str, Enum):
    """What a step did to the project."""

    GENERATED = "generated"
    SKIPPED = "skipped"


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def _display_path(context: InitContext, path: Path) -> str:
    """Path relative to the project root, for log lines."""
    try:
        return str(path.relative_to(context.base_dir))
    except ValueError:
        return str(path)


def write_json_if_absent(context: InitContext, path: Path, document: BaseModel) -> StepOutcome:
    """Write a model as 2-space indented JSON unless the file exists.

    Args:
        context: Shared init context (for logging and the project root).
        path: Absolute destination path.
        document: Pydantic model to serialize. Unset optional blocks
            are left out.

    Returns:
        SKIPPED if the file already existed, GENERATED otherwise.
    """
    display = _display_path(context, path)
    if path.exists():
        context.log(f" * {display} already initialized.")
        return StepOutcome.SKIPPED

    data = document.model_dump(mode="json", exclude_none=True)
    content = json.dumps(data, indent=2) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    context.log(f" * Generated {display}")
    return StepOutcome.GENERATED


def copy_if_absent(context: InitContext, source: Path, destination: Path) -> StepOutcome:
    """Copy a bundled file or directory tree unless the destination exists.

    Raises:
        InitError: If the bundled source is missing.
    """
    display = _display_path(context, destination)
    if destination.exists():
        context.log(f" * {display} already initialized.")
        return StepOutcome.SKIPPED

    if not source.exists():
        raise InitError(f"Bundled template not found: {source}")

    destination.parent.mkdir(parents=True, exist_ok=True)
    if source.is_dir():
        shutil.copytree(source, destination)
    else:
        shutil.copy2(source, destination)
    context.log(f" * Generated {display}")
    return StepOutcome.GENERATED


def init_directory(context: InitContext) -> StepOutcome:
    """Create the project directory, or confirm before reusing a non-empty one.

    Raises:
        InitAborted: If the directory is not empty and the user declines.
        InitError: If the target path exists but is not a directory.
    """
    base_dir = context.base_dir
    if not base_dir.exists():
        base_dir.mkdir(parents=True)
        return StepOutcome.GENERATED

    if not base_dir.is_dir():
        raise InitError(f"{base_dir} exists and is not a directory")

    if any(base_dir.iterdir()) and not context.flags.get("yes", False):
        proceed = context.confirm(NON_EMPTY_PROMPT)
        context.log.br()
        if not proceed:
            raise InitAborted(str(base_dir))

    return StepOutcome.SKIPPED


def init_git(context: InitContext) -> StepOutcome:
    """Run `git init` in the project unless .git already exists."""
    if (context.base_dir / ".git").exists():
        context.log(" * Git repository already initialized.")
        return StepOutcome.SKIPPED

    context.runner.run([context.settings.git_command, "init"], cwd=context.base_dir)
    context.log(" * Initialized git repository")
    return StepOutcome.GENERATED


def init_manifest(context: InitContext) -> StepOutcome:
    manifest = PackageManifest(name=context.base_dir.name)
    return write_json_if_absent(context, context.base_dir / "package.json", manifest)


def init_development_config(context: InitContext) -> StepOutcome:
    path = context.base_dir / "config" / "development.json"
    return write_json_if_absent(context, path, development_config())


def init_production_config(context: InitContext) -> StepOutcome:
    path = context.base_dir / "config" / "production.json"
    return write_json_if_absent(context, path, production_config())


def init_templates(context: InitContext) -> StepOutcome:
    """Copy server.js, views/, public/ and .gitignore into the project.

    Returns:
        GENERATED if at least one template was copied, else SKIPPED.
    """
    templates_dir = _get_templates_dir()
    outcomes = [
        copy_if_absent(context, templates_dir / template_name, context.base_dir / output_path)
        for template_name, output_path in _TEMPLATE_MAP
    ]
    if StepOutcome.GENERATED in outcomes:
        return StepOutcome.GENERATED
    return StepOutcome.SKIPPED


def init_keys(context: InitContext) -> StepOutcome:
    """Generate an RSA key pair under config/keys with openssl.

    Only the keys directory is checked: if it exists, nothing is
    generated, even when one of the PEM files is missing. Both keys are
    built in a staging directory that is renamed to config/keys once
    the pair is complete, so a failed run never leaves a half-filled
    keys directory behind.
    """
    config_dir = context.base_dir / "config"
    keys_dir = config_dir / "keys"
    staging_dir = config_dir / ".keys.partial"
    private_key = staging_dir / "private.pem"
    public_key = staging_dir / "public.pem"

    if keys_dir.exists():
        context.log(" * RSA key pair already initialized.")
        return StepOutcome.SKIPPED

    openssl = context.settings.openssl_command
    result = context.runner.run(
        [openssl, "genrsa", str(context.settings.key_bits)], cwd=context.base_dir
    )

    # Leftover from an interrupted run
    if staging_dir.exists():
        shutil.rmtree(staging_dir)
    staging_dir.mkdir(parents=True, mode=0o700)
    try:
        private_key.touch(mode=0o600)
        private_key.write_text(result.stdout, encoding="utf-8")

        result = context.runner.run(
            [openssl, "rsa", "-in", str(private_key), "-pubout"], cwd=context.base_dir
        )
        public_key.write_text(result.stdout, encoding="utf-8")
        staging_dir.rename(keys_dir)
    except Exception:
        shutil.rmtree(staging_dir, ignore_errors=True)
        raise

    context.log(" * Generated RSA keypair")
    return StepOutcome.GENERATED
