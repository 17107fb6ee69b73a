from skillkit.cli import app

app(prog_name="skills")
