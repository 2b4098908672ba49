from timeanddate.cli import run

run()
