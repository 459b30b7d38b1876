"""Static help text, in rich markup."""

NAME = "dmget"
DESCRIPTION = "A CLI helper to download Devmountain exercises, homework, and lecture demos."

PROGRAM_RUNNING = f"[bold magenta]██████ Running {NAME}...[/bold magenta]\n"

HELP_TLDR = f"""\
[green]To see examples of how to use [blue]{NAME}[/blue], run:

      [cyan]{NAME} tldr[/cyan]

Or, get more detailed help with:

      [cyan]{NAME} --help[/cyan][/green]
"""

TLDR = f"""\
[green]Download the starter code for a lab exercise:

      [cyan]{NAME} making-decisions[/cyan]

Download the solution code for a lab exercise:

      [cyan]{NAME} making-decisions --solution[/cyan]

Download the starter code for a homework assignment:

      [cyan]{NAME} coding-intro --homework[/cyan]

Download the demo code for a lecture:

      [cyan]{NAME} coding-intro --demo[/cyan][/green]
"""


def after_success(project_dir: str) -> str:
    """Return next-step instructions for a freshly extracted project."""
    return f"""\
[green]To cd into the project directory and open it in VS Code, run:

      [cyan]cd {project_dir}[/cyan]
      [cyan]code .[/cyan]

Download the solution by running the same command with the --solution flag \
(run [cyan]{NAME} tldr[/cyan] for examples).[/green]
"""
