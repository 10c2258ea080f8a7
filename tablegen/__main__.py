from tablegen.main import app

app(prog_name="tablegen")
