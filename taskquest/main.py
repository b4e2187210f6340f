"""Command-line entry point for TaskQuest"""
import argparse
import logging
import sys
from typing import List, Optional

from taskquest import config
from taskquest.exceptions import TaskQuestError
from taskquest.gamification import format_streak_display, get_achievement_progress
from taskquest.models.task import TaskCategory, TaskPriority
from taskquest.services.task_service import TaskService
from taskquest.store import TaskStore, create_store
from taskquest.utils.datetime_helpers import parse_date

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Set up logging; an unknown LOG_LEVEL falls back to INFO until validation reports it"""
    level = logging.getLevelName(config.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=level
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskquest", description="Level up your productivity")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a task")
    add.add_argument("title", help="Task title")
    add.add_argument("--description", default="", help="Task description")
    add.add_argument(
        "--category",
        choices=[c.value for c in TaskCategory if c is not TaskCategory.BONUS],
        default=TaskCategory.PERSONAL.value,
    )
    add.add_argument("--priority", choices=[p.value for p in TaskPriority], default=TaskPriority.NORMAL.value)
    add.add_argument("--due", type=parse_date, help="Due date (YYYY-MM-DD)")

    voice = sub.add_parser("voice", help="Add a task from a dictation transcript")
    voice.add_argument("transcript", help="Transcribed text")

    complete = sub.add_parser("complete", help="Complete a task")
    complete.add_argument("task_id")

    delete = sub.add_parser("delete", help="Delete a task")
    delete.add_argument("task_id")

    lst = sub.add_parser("list", help="List tasks")
    lst.add_argument("--pending", action="store_true", help="Hide completed tasks")

    sub.add_parser("stats", help="Show level, XP and streak")
    sub.add_parser("achievements", help="Show achievements")

    return parser


def run(args: argparse.Namespace, service: TaskService) -> None:
    """Execute one CLI command"""
    if args.command == "add":
        task = service.add_task(
            title=args.title,
            description=args.description,
            category=TaskCategory(args.category),
            priority=TaskPriority(args.priority),
            due_date=args.due,
        )
        print(f"Added {task.id}: {task.title} (+{task.xp_reward} XP)")

    elif args.command == "voice":
        task = service.create_voice_task(args.transcript)
        print(f"Added {task.id}: {task.title} (+{task.xp_reward} XP)")

    elif args.command == "complete":
        result = service.complete_task(args.task_id)
        print(result.message)
        print(f"+{result.xp_awarded} XP (total {result.total_xp})")
        if result.level_up_message:
            print(result.level_up_message)
        for achievement_id in result.new_achievements:
            print(f"🏆 Achievement unlocked: {achievement_id}")

    elif args.command == "delete":
        service.delete_task(args.task_id)
        print(f"Deleted {args.task_id}")

    elif args.command == "list":
        tasks = service.list_tasks(include_completed=not args.pending)
        if not tasks:
            print("No tasks yet. Add one with 'taskquest add'.")
        for task in tasks:
            mark = "x" if task.completed else " "
            due = f" (due {task.due_date.isoformat()})" if task.due_date else ""
            print(f"[{mark}] {task.id}  {task.title}  [{task.category.value}/{task.priority.value}] +{task.xp_reward} XP{due}")

    elif args.command == "stats":
        dash = service.get_dashboard()
        print(f"Level {dash.level} - {dash.xp} XP ({dash.progress_percent:.0f}% to next, {dash.xp_to_next_level} XP left)")
        print(format_streak_display(dash.streak))
        print(f"Today: {dash.completed_today} completed | Total: {dash.tasks_completed} tasks done")
        print(f"Achievements: {dash.achievements_unlocked}/{dash.total_achievements}")

    elif args.command == "achievements":
        progress = get_achievement_progress(service.get_stats())
        print(f"{progress['total_unlocked']}/{progress['total_achievements']} unlocked ({progress['completion_percent']:.0f}%)")
        for definition in progress["unlocked"]:
            print(f"  {definition.icon} {definition.title} - {definition.description}")
        for definition in progress["locked"]:
            print(f"  🔒 {definition.title} - {definition.description}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    args = build_parser().parse_args(argv)
    try:
        configure_logging()
        config.validate_config()

        service = TaskService(TaskStore(create_store()))
        service.ensure_daily_bonus()
        run(args, service)
        return 0

    except TaskQuestError as e:
        print(e.user_message, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
