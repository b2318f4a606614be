from colortally.runner import cli

cli()
