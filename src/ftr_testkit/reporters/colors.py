import typer

SPEED_COLORS = {"fast": "bright_black", "medium": "yellow", "slow": "red"}

def suite(text: str) -> str: return typer.style(text, bold=True)
def pending(text: str) -> str: return typer.style(text, fg="cyan")
def pass_(text: str) -> str: return typer.style(text, fg="green")
def fail(text: str) -> str: return typer.style(text, fg="red")

def speed(name: str, text: str) -> str:
    return typer.style(text, fg=SPEED_COLORS.get(name, "bright_black"))
