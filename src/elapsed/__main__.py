from elapsed.cli.main import typer_app

if __name__ == "__main__":
    typer_app(prog_name="elapsed")
