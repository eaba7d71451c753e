#!/usr/bin/env python3
import argparse
import os

import psycopg


DROP_SQL = """
drop table if exists tenant_custom_domains cascade;
drop table if exists tenants cascade;
drop table if exists alembic_version;
"""


def main() -> int:
    parser = argparse.ArgumentParser(description='Drop the tenant routing tables from the development database.')
    parser.add_argument('--yes', action='store_true', help='Required to execute destructive reset.')
    args = parser.parse_args()

    if not args.yes:
        raise SystemExit('Refusing to reset database. Re-run with --yes to confirm destructive action.')

    database_url = os.environ.get('DATABASE_URL')
    if not database_url:
        raise SystemExit('DATABASE_URL is required.')
    database_url = database_url.replace('postgresql+psycopg://', 'postgresql://')

    with psycopg.connect(database_url) as connection:
        with connection.cursor() as cursor:
            cursor.execute(DROP_SQL)
        connection.commit()

    print('Development database reset completed.')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
