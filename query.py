#!/usr/bin/env python3
"""Ad hoc query runner for Dinezzy Recipe Service.

Run the pipeline directly without starting the API server.

Usage:
    python query.py "aloo, pyaz, tamatar"
    python query.py --extra --meal-type dinner "paneer, palak"
    python query.py --day-plan "chawal, dal, gobi"
    python query.py --ask "How do I temper mustard seeds?"
    python query.py --debug "aloo, gobi"  # Show full JSON response and analytics

Features:
- Recipe search, day plans and the cooking assistant from one entry point
- Recipes and plans rendered as rich tables and panels
- Debug mode to display full JSON with all fields
"""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from src.analytics.tracker import EventTracker
from src.clients.gemini import GeminiClient
from src.models.models import MEAL_TYPES, DayPlan, Recipe
from src.services.assistant import ask_assistant, create_assistant_agent
from src.services.pipeline import RecipePipeline
from src.utils.config import config
from src.utils.logger import logger

console = Console()


def render_recipes(recipes: list[Recipe]) -> None:
    table = Table(title=f"{len(recipes)} recipes", show_lines=True)
    table.add_column("Name", style="bold")
    table.add_column("Meal")
    table.add_column("Difficulty")
    table.add_column("Time (min)", justify="right")
    table.add_column("Extra to buy")

    for recipe in recipes:
        table.add_row(
            recipe.name,
            recipe.meal_type,
            recipe.difficulty,
            f"{recipe.prep_time} + {recipe.cooking_time}",
            ", ".join(recipe.extra_ingredients) or "-",
        )
    console.print(table)


def render_day_plans(plans: list[DayPlan]) -> None:
    for plan in plans:
        body = "\n".join(
            f"[bold]{slot.title()}:[/bold] {meal.name} ({meal.cooking_time} min)"
            for slot, meal in (("breakfast", plan.breakfast), ("lunch", plan.lunch), ("dinner", plan.dinner))
        )
        body += f"\n[dim]Total: {plan.total_cooking_time} min | Shopping: {', '.join(plan.shopping_list) or '-'}[/dim]"
        console.print(Panel(body, title=plan.plan_name, subtitle=plan.plan_description))


async def run_query(args: argparse.Namespace) -> None:
    """Execute a single ad hoc query and print the result.

    Args:
        args: Parsed command line arguments.
    """
    text = " ".join(args.query)

    if args.ask:
        reply = await ask_assistant(create_assistant_agent(), text)
        if args.debug:
            console.print_json(data=reply.model_dump(by_alias=True))
        console.print(Markdown(reply.text))
        return

    pipeline = RecipePipeline(client=GeminiClient(), tracker=EventTracker(capacity=config.ANALYTICS_CAPACITY))

    if args.day_plan:
        result = await pipeline.generate_day_plan(text)
        render_day_plans(result)
    else:
        result = await pipeline.search_recipes(text, include_extra=args.extra, meal_type_filter=args.meal_type)
        render_recipes(result)

    if args.debug:
        console.print("[bold cyan]Debug Mode: Full Response[/bold cyan]")
        console.print_json(data=[item.model_dump(by_alias=True) for item in result])
        console.print("[bold cyan]Analytics[/bold cyan]")
        console.print_json(data=pipeline.get_analytics_summary().model_dump(by_alias=True))


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a Dinezzy query without the API server")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--day-plan", action="store_true", help="Generate three day plans")
    mode.add_argument("--ask", action="store_true", help="Ask the cooking assistant a free-form question")
    parser.add_argument("--extra", action="store_true", help="Allow recipes that need extra ingredients")
    parser.add_argument("--meal-type", choices=MEAL_TYPES, help="Only return recipes of this meal type")
    parser.add_argument("--debug", action="store_true", help="Print full JSON output")
    parser.add_argument("query", nargs="+", help="Ingredients, or a question with --ask")
    return parser.parse_args(argv)


if __name__ == "__main__":
    try:
        asyncio.run(run_query(parse_args(sys.argv[1:])))
    except KeyboardInterrupt:
        logger.info("\nQuery interrupted by user.")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Query execution failed: {e}", exc_info=True)
        sys.exit(1)
