import argparse
import getpass
import os
import sys
from pathlib import Path

from exambuilder.client import DEFAULT_API_URL, ApiError, ExamBuilderClient, SessionStore
from exambuilder.utils.time_utils import parse_iso_timestamp


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage tests on an Exam Builder server")
    parser.add_argument(
        "--api-url",
        default=os.environ.get("EXAMBUILDER_API_URL", DEFAULT_API_URL),
        help="Base URL of the API",
    )
    parser.add_argument(
        "--session-file",
        type=Path,
        default=None,
        help="Where the login session is stored",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    register = sub.add_parser("register", help="Create an admin account")
    register.add_argument("email")
    register.add_argument("name")
    register.add_argument("--password", help="Prompted for when omitted")

    login = sub.add_parser("login", help="Log in and store the session")
    login.add_argument("email")
    login.add_argument("--password", help="Prompted for when omitted")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("whoami", help="Check the stored token")
    sub.add_parser("list", help="List your tests")

    show = sub.add_parser("show", help="Show a test with its questions")
    show.add_argument("test_id")

    create = sub.add_parser("create", help="Create a test")
    create.add_argument("title")
    create.add_argument("--description", default="")

    delete = sub.add_parser("delete", help="Delete a test")
    delete.add_argument("test_id")

    add = sub.add_parser("add-question", help="Add a question to a test")
    add.add_argument("test_id")
    add.add_argument("--text", required=True)
    for label in "ABCD":
        add.add_argument(f"--{label.lower()}", dest=f"option_{label}", required=True)
    add.add_argument("--answer", required=True, help="Correct option label A-D")

    remove = sub.add_parser("delete-question", help="Delete a question from a test")
    remove.add_argument("test_id")
    remove.add_argument("question_id")

    upload = sub.add_parser("upload", help="Import questions from a CSV file")
    upload.add_argument("test_id")
    upload.add_argument("file", type=Path)

    return parser.parse_args(argv)


def _format_date(value: object) -> str:
    parsed = parse_iso_timestamp(value)
    return parsed.strftime("%Y-%m-%d %H:%M") if parsed else ""


def print_test(test: dict, with_questions: bool = False) -> None:
    count = len(test.get("questions", []))
    print(f"{test['id']}  {test['title']}  ({count} questions, created {_format_date(test.get('createdAt'))})")
    if test.get("description"):
        print(f"    {test['description']}")
    if not with_questions:
        return
    for index, question in enumerate(test.get("questions", []), start=1):
        print(f"  {index}. {question['questionText']}  [{question['id']}]")
        for label, text in question["options"].items():
            marker = "*" if label == question["correctAnswer"] else " "
            print(f"     {marker} {label}) {text}")


def run(args: argparse.Namespace, store: SessionStore, client: ExamBuilderClient) -> None:
    if args.command == "register":
        password = args.password or getpass.getpass("Password: ")
        data = client.register(args.email, password, args.name)
        store.save(data["token"], data["admin"])
        print(data["message"])
    elif args.command == "login":
        password = args.password or getpass.getpass("Password: ")
        data = client.login(args.email, password)
        store.save(data["token"], data["admin"])
        print(f"Logged in as {data['admin']['name']} <{data['admin']['email']}>")
    elif args.command == "logout":
        store.clear()
        print("Logged out")
    elif args.command == "whoami":
        data = client.verify()
        print(f"{data['admin']['email']} ({data['admin']['id']})")
    elif args.command == "list":
        tests = client.list_tests()
        if not tests:
            print("No tests yet")
        for test in tests:
            print_test(test)
    elif args.command == "show":
        print_test(client.get_test(args.test_id), with_questions=True)
    elif args.command == "create":
        test = client.create_test(args.title, args.description)
        print(f"Created test {test['id']}")
    elif args.command == "delete":
        print(client.delete_test(args.test_id)["message"])
    elif args.command == "add-question":
        options = {label: getattr(args, f"option_{label}") for label in "ABCD"}
        question = client.add_question(args.test_id, args.text, options, args.answer)
        print(f"Added question {question['id']}")
    elif args.command == "delete-question":
        print(client.delete_question(args.test_id, args.question_id)["message"])
    elif args.command == "upload":
        print(client.upload_csv(args.test_id, args.file)["message"])


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    store = SessionStore(args.session_file)
    client = ExamBuilderClient(args.api_url, token=store.token)
    try:
        run(args, store, client)
    except ApiError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
