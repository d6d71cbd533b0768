import typer

from server import serve
from timetotravel.config import load_config
from timetotravel.logs import setup_logging

app = typer.Typer(help="TimeToTravelTo web service")

@app.command()
def run():
    """Start the HTTP server on $PORT (default 3000)."""
    cfg = load_config()
    setup_logging(cfg.log_level)
    serve(cfg)

if __name__ == "__main__":
    app()
