from tinysh.cli import app

app(prog_name="tinysh")
