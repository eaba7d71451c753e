#!/usr/bin/env python3
import argparse
import os
import signal
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT / 'backend'


def run_migrations(env: dict[str, str]) -> None:
    subprocess.run([sys.executable, '-m', 'alembic', 'upgrade', 'head'], cwd=str(BACKEND_DIR), env=env, check=True)


def spawn_backend(env: dict[str, str], port: int) -> subprocess.Popen:
    backend_cmd = [
        sys.executable,
        '-m',
        'uvicorn',
        'app.main:app',
        '--host',
        '0.0.0.0',
        '--port',
        str(port),
        '--reload',
    ]
    return subprocess.Popen(backend_cmd, cwd=str(BACKEND_DIR), env=env)


def main() -> int:
    parser = argparse.ArgumentParser(description='Run the tenant routing API locally.')
    parser.add_argument('--port', type=int, default=8001)
    parser.add_argument('--skip-migrations', action='store_true')
    args = parser.parse_args()

    env = os.environ.copy()
    if not args.skip_migrations:
        run_migrations(env)

    backend = spawn_backend(env, args.port)

    def handle_signal(_sig: int, _frame: object) -> None:
        if backend.poll() is None:
            backend.terminate()
        raise SystemExit(0)

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    return backend.wait()


if __name__ == '__main__':
    raise SystemExit(main())
