from npminspect.cli import app

app()
