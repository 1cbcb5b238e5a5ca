from contractdesk.cli import app

app(prog_name="contractdesk")
