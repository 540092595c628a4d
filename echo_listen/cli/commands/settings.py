"""CLI command for viewing and changing settings."""

from dataclasses import asdict

from echo_listen.config import ConfigManager
from echo_listen.presenters import ConsolePresenter


def settings_command(args) -> int:
    """Show settings, or apply the given changes and save them."""
    presenter = ConsolePresenter()

    if args.reset:
        ConfigManager.delete_config()
        presenter.show_success("Settings restored to defaults")

    changes = {}
    if args.method:
        changes["default_slicing_method"] = args.method
    if args.rule is not None:
        if args.rule < 1:
            presenter.show_error("Rule value must be at least 1")
            return 1
        changes["default_rule_value"] = args.rule
    if args.language:
        changes["dictionary_language"] = args.language
    if args.library:
        changes["library_path"] = args.library

    if changes:
        config = ConfigManager.update_config(**changes)
        presenter.show_success("Settings saved")
    else:
        config = ConfigManager.load_config()

    for key, value in asdict(config).items():
        presenter.show_info(f"  {key}: {value}")
    return 0
