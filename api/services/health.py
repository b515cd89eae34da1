"""
Health Check Service

Reports the health of the data store together with basic system metrics.
"""

import os
import time
import psutil
from datetime import datetime
from typing import Dict, Any
from opentelemetry import trace

from services.data_service import DataService

tracer = trace.get_tracer(__name__)


class HealthCheckService:
    """Service for system health monitoring."""

    def __init__(self, data_service: DataService, service_version: str = "1.0.0"):
        self.data_service = data_service
        self.service_version = service_version

    def get_comprehensive_health(self) -> Dict[str, Any]:
        """Get health status including the data store and system metrics."""
        with tracer.start_as_current_span("health.comprehensive_check") as span:
            start_time = time.time()

            data_store_health = self._check_data_store_health()
            overall_status = data_store_health["status"]

            response_time_ms = round((time.time() - start_time) * 1000, 2)

            health_data = {
                "status": overall_status,
                "service": "crisischeckin-api",
                "version": self.service_version,
                "environment": os.getenv('ENVIRONMENT', 'development'),
                "timestamp": datetime.utcnow().isoformat() + "Z",
                "response_time_ms": response_time_ms,
                "dependencies": {
                    "data_store": data_store_health
                },
                "system_metrics": self._get_system_metrics()
            }

            span.set_attributes({
                "health.overall_status": overall_status,
                "health.response_time_ms": response_time_ms,
                "health.data_store_backend": data_store_health.get("backend", "unknown")
            })

            return health_data

    def _check_data_store_health(self) -> Dict[str, Any]:
        """Check the data store can serve requests."""
        with tracer.start_as_current_span("health.data_store_check") as span:
            try:
                start_time = time.time()
                health_info = dict(self.data_service.health_check())
                health_info["response_time_ms"] = round((time.time() - start_time) * 1000, 2)
                health_info["last_check"] = datetime.utcnow().isoformat() + "Z"

                span.set_attribute("data_store.status", health_info.get("status", "unknown"))
                return health_info

            except Exception as e:
                span.set_attribute("data_store.status", "unhealthy")
                span.record_exception(e)

                return {
                    "status": "unhealthy",
                    "error": str(e),
                    "last_check": datetime.utcnow().isoformat() + "Z"
                }

    def _get_system_metrics(self) -> Dict[str, Any]:
        """Get basic system performance metrics."""
        try:
            memory = psutil.virtual_memory()
            disk = psutil.disk_usage('/')

            return {
                "cpu_percent": psutil.cpu_percent(interval=None),
                "memory": {
                    "used_mb": round(memory.used / 1024 / 1024, 2),
                    "total_mb": round(memory.total / 1024 / 1024, 2),
                    "percent": memory.percent
                },
                "disk": {
                    "used_gb": round(disk.used / 1024 / 1024 / 1024, 2),
                    "total_gb": round(disk.total / 1024 / 1024 / 1024, 2),
                    "percent": round((disk.used / disk.total) * 100, 2)
                },
                "load_average": list(os.getloadavg()) if hasattr(os, 'getloadavg') else None
            }
        except Exception as e:
            return {
                "error": f"Failed to collect system metrics: {str(e)}"
            }
