"""Demo entry point for console-ui prompts."""

from loguru import logger

from console_ui import actions
from console_ui.config import get_settings
from console_ui.dsl import Alternatives, Dsl
from console_ui.io import ConsoleAdapter, IOAdapter

TOPPINGS = ["Cheese", "Mushrooms", "Olives", "Peppers"]


def order_pizza(comm: Dsl) -> str:
    """Ask for a pizza order and return a summary of it."""
    name = comm.prompt_for(actions.text("Who is this order for?"))
    size = comm.prompt_for(actions.single_choice("Pick a size", ["Small", "Large"]))
    toppings = comm.prompt_for(
        actions.multi_choice("Pick your toppings", TOPPINGS, 0, 3)
    )
    chosen = ", ".join(TOPPINGS[i] for i in sorted(toppings)) or "no toppings"
    size_label = ["small", "large"][size]
    return f"{name} ordered a {size_label} pizza with {chosen}"


def run_demo(comm: Dsl) -> str:
    """Run the demo menu and return the result of the chosen entry."""
    menu = Alternatives[str]()
    menu.will("Order a pizza", lambda: order_pizza(comm))
    menu.will(
        "Leave",
        lambda: comm.ask("Are you sure you want to leave?").suggest(
            Alternatives[str]()
            .will("Yes, goodbye", lambda: f"You chose '{menu.label}'")
            .will("No, order a pizza after all", lambda: order_pizza(comm))
        ),
    )
    return comm.ask("What would you like to do?").suggest(menu)


def main(io: IOAdapter | None = None) -> None:
    """Main entry point."""
    io = io or ConsoleAdapter()

    io.output("=" * 70)
    io.output("CONSOLE UI DEMO")
    io.output("=" * 70)

    try:
        settings = get_settings()
        if settings.debug:
            logger.enable("console_ui")

        comm = Dsl(io, settings.prompt)
        result = run_demo(comm)

        if comm.prompt_for(actions.yes_or_no("Show a summary?")):
            io.output(f"\n{result}")

        io.output("\n" + "=" * 70)
        io.output("DONE")
        io.output("=" * 70)

    except ValueError as e:
        io.output(f"\nConfiguration error: {e}")
        io.output("Please check CUI_PROMPT and CUI_DEBUG in your .env file")
    except EOFError:
        io.output("\nInput closed, exiting.")


if __name__ == "__main__":
    main()
