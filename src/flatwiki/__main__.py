from flatwiki.cli import cli

cli(prog_name="flatwiki")
