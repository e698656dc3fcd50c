"""CLI Commands"""

import os
import sys

from git_commit_llm.config import ENV_MODEL, ENV_TOOL, ConfigManager, get_config_path, load_config
from git_commit_llm.output import bold, dim, info


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {ConfigManager.CONFIG_FILENAME} found)")

    overrides = [(name, os.environ.get(name)) for name in (ENV_MODEL, ENV_TOOL) if os.environ.get(name)]
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in overrides:
            print(f"    {name}={value}")

    print()
    print(f"  {bold('Settings:')}")
    for key, value in config.to_dict().items():
        print(f"    {key + ':':<16} {info(str(value))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  {ConfigManager.CONFIG_FILENAME} (in current directory)")
    print(f"    Global: ~/{ConfigManager.CONFIG_FILENAME}\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete git-commit-llm)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell git-commit-llm | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish git-commit-llm | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
