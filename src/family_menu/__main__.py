from family_menu.cli import cli

cli()
