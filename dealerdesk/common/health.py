"""
Health check endpoints for load balancer and container probes.
"""
from django.http import JsonResponse
from django.db import connection
from django.db.utils import DatabaseError
import logging

logger = logging.getLogger(__name__)


def healthz(request):
    """
    Liveness probe - checks if the application is alive.
    Should return 200 if the app is running, regardless of dependencies.
    """
    return JsonResponse({
        "status": "healthy",
        "service": "dealerdesk",
    })


def _database_ready() -> bool:
    try:
        connection.ensure_connection()
        return True
    except DatabaseError as e:
        logger.warning(f"Database check failed: {e}")
        return False


def readiness(request):
    """
    Readiness probe - checks if the application is ready to serve traffic.
    """
    checks = {
        "database": _database_ready(),
    }

    is_ready = checks["database"]
    status_code = 200 if is_ready else 503

    return JsonResponse({
        "status": "ready" if is_ready else "not ready",
        "checks": checks,
    }, status=status_code)


def startup(request):
    """
    Startup probe - database reachable and no unapplied migrations.
    Pending migrations are reported but do not fail the probe.
    """
    checks = {
        "database": _database_ready(),
        "migrations": False,
    }

    if checks["database"]:
        from django.db.migrations.executor import MigrationExecutor
        executor = MigrationExecutor(connection)
        plan = executor.migration_plan(executor.loader.graph.leaf_nodes())
        checks["migrations"] = len(plan) == 0

    is_ready = checks["database"]
    status_code = 200 if is_ready else 503

    return JsonResponse({
        "status": "started" if is_ready else "starting",
        "checks": checks,
    }, status=status_code)
