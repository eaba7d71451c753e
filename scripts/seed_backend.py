#!/usr/bin/env python3
import argparse
import os
import uuid

import psycopg


DEMO_TENANTS = [
    # slug, company name, status, landing page, bindings as (domain, subdomain, verified)
    ('acme', 'Acme Networks', 'active', True, [('acme.localtest.me', None, True)]),
    ('globex', 'Globex Broadband', 'trial', False, [('globex.localtest.me', 'portal', True)]),
    ('initech', 'Initech Fiber', 'suspended', True, [('initech.localtest.me', None, False)]),
]


def seed_tenant(connection: psycopg.Connection, slug: str, name: str, status: str, landing: bool) -> str:
    with connection.cursor() as cursor:
        cursor.execute(
            """
            insert into tenants (id, slug, company_name, status, landing_page_enabled)
            values (%s, %s, %s, %s, %s)
            on conflict (slug) do update
              set company_name = excluded.company_name,
                  status = excluded.status,
                  landing_page_enabled = excluded.landing_page_enabled
            returning id::text
            """,
            (str(uuid.uuid4()), slug, name, status, landing),
        )
        return cursor.fetchone()[0]


def seed_binding(
    connection: psycopg.Connection, tenant_id: str, domain: str, subdomain: str | None, verified: bool
) -> None:
    with connection.cursor() as cursor:
        cursor.execute(
            """
            delete from tenant_custom_domains
            where domain = %s and subdomain is not distinct from %s
            """,
            (domain, subdomain),
        )
        cursor.execute(
            """
            insert into tenant_custom_domains (id, tenant_id, domain, subdomain, is_verified, ssl_status)
            values (%s, %s, %s, %s, %s, %s)
            """,
            (str(uuid.uuid4()), tenant_id, domain, subdomain, verified, 'active' if verified else 'pending'),
        )


def main() -> int:
    parser = argparse.ArgumentParser(description='Seed demo tenants and custom domain bindings.')
    parser.add_argument('--dry-run', action='store_true', help='Roll back instead of committing.')
    args = parser.parse_args()

    database_url = os.environ.get('DATABASE_URL')
    if not database_url:
        raise SystemExit('DATABASE_URL is required to run seed scripts.')
    # psycopg expects a plain libpq URL, not the SQLAlchemy dialect form.
    database_url = database_url.replace('postgresql+psycopg://', 'postgresql://')

    with psycopg.connect(database_url) as connection:
        connection.autocommit = False
        for slug, name, status, landing, bindings in DEMO_TENANTS:
            tenant_id = seed_tenant(connection, slug, name, status, landing)
            for domain, subdomain, verified in bindings:
                host = f'{subdomain}.{domain}' if subdomain else domain
                print(f'Binding {host} -> {slug} ({status})')
                seed_binding(connection, tenant_id, domain, subdomain, verified)
        if args.dry_run:
            connection.rollback()
            print('Dry run: changes rolled back.')
            return 0
        connection.commit()

    print('Demo tenants seeded.')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
