"""PATH verification and shell-specific guidance."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class PathGuidance:
    """Advice for adding the install directory to PATH."""

    shell_name: str
    profile: str
    command: str


def _normalize(entry: str) -> str:
    if entry == "/":
        return entry
    return entry.rstrip("/")


def is_on_path(install_dir: Path | str, path_env: str) -> bool:
    """Return True when ``install_dir`` is an exact PATH segment.

    Matching is per colon-delimited segment, so ``/opt/install/bin`` is not
    found in ``/opt/xinstall/bin``. Trailing slashes are ignored.

    Args:
        install_dir: Directory the binary was installed into
        path_env: Value of the PATH environment variable

    """
    wanted = _normalize(str(install_dir))
    return any(
        _normalize(entry) == wanted
        for entry in path_env.split(":")
        if entry
    )


def shell_guidance(install_dir: Path | str, shell: str) -> PathGuidance:
    """Build PATH guidance for the user's login shell.

    Args:
        install_dir: Directory to add to PATH
        shell: Value of the SHELL environment variable (bash if empty)

    Returns:
        PathGuidance naming the profile file and the command to add

    """
    shell_name = PurePosixPath(shell).name if shell else "bash"
    export = f'export PATH="{install_dir}:$PATH"'

    if shell_name == "zsh":
        return PathGuidance(shell_name, "$HOME/.zshrc", export)
    if shell_name == "fish":
        return PathGuidance(
            shell_name,
            "$HOME/.config/fish/config.fish",
            f"fish_add_path {install_dir}",
        )
    return PathGuidance(shell_name, "$HOME/.bashrc", export)
