from ._helpers import run_command


def auth() -> None:
    """Check that the API token is accepted."""

    def action(ctx):
        ctx.client.auth.check()
        ctx.printer.print_message("Token is valid")

    run_command(action)
