"""
Liveness and readiness endpoints.

``/health/`` answers as long as the process serves requests. ``/health/ready/``
runs every readiness probe and answers 503 when one of them fails: the
database must answer a query and every migration must be applied, otherwise
contract and payment writes would fail.
"""
import logging
import time

from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.migrations.executor import MigrationExecutor
from django.http import JsonResponse
from django.urls import path
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


def database_answers():
    with connections[DEFAULT_DB_ALIAS].cursor() as cursor:
        cursor.execute('SELECT 1')
        cursor.fetchone()


def migrations_applied():
    executor = MigrationExecutor(connections[DEFAULT_DB_ALIAS])
    pending = executor.migration_plan(executor.loader.graph.leaf_nodes())
    if pending:
        names = ', '.join(f"{migration.app_label}.{migration.name}" for migration, _backwards in pending)
        raise DatabaseError(f"unapplied migrations: {names}")


READINESS_CHECKS = (
    ('database', database_answers),
    ('migrations', migrations_applied),
)


def run_check(name, check):
    started = time.monotonic()
    try:
        check()
    except DatabaseError as e:
        logger.error(f"Readiness check {name} failed: {e}")
        return {'ok': False, 'error': str(e)}
    return {'ok': True, 'latency_ms': round((time.monotonic() - started) * 1000, 2)}


@csrf_exempt
@require_GET
def health_check(request):
    return JsonResponse({'status': 'healthy', 'timestamp': time.time()})


@csrf_exempt
@require_GET
def readiness_check(request):
    checks = {name: run_check(name, check) for name, check in READINESS_CHECKS}
    ready = all(result['ok'] for result in checks.values())
    return JsonResponse(
        {'status': 'ready' if ready else 'not_ready', 'timestamp': time.time(), 'checks': checks},
        status=200 if ready else 503,
    )


def get_health_urls():
    return [
        path('health/', health_check, name='health_check'),
        path('health/ready/', readiness_check, name='readiness_check'),
    ]
