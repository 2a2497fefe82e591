"""Create the users table in the configured DynamoDB (real service or LocalStack)."""
from __future__ import annotations

import argparse
import sys

from users_api import create_app
from users_api.db.dynamo import get_dynamodb
from users_api.db.provisioning import create_users_table
from users_api.errors import StoreError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a table in DynamoDB")
    parser.add_argument("--table", default=None, help="table name (default: DYNAMODB_TABLE or 'users')")
    args = parser.parse_args(argv)

    app = create_app()
    dynamo = get_dynamodb(app)
    table_name = args.table or dynamo.config.table_name
    try:
        created = create_users_table(dynamo.client, table_name)
    except StoreError as exc:
        print(f"Error creating table '{table_name}': {exc.message}", file=sys.stderr)
        return 1
    print(f"Table '{table_name}' created successfully: {created}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
