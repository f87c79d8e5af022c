from configexport.cli.main import app

app(prog_name="configexport")
