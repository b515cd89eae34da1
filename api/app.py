"""
Crisis Check-in API - Flask Application Entry Point

This module builds the Flask application with OpenAPI 3.0 support,
configures middleware, and wires the disaster service to its data store.
"""

import os
from datetime import datetime
from typing import Any, Dict, Optional
from flask import jsonify
from flask_openapi3 import OpenAPI, Info, Tag
from observability.config import setup_observability
from observability.middleware import add_observability_middleware

from middleware.error_handler import ErrorHandlerMiddleware
from services.hal import create_hal_formatter
from services.data_service import DataService
from services.memory_data import InMemoryDataService
from services.mongodb import MongoDBService, MongoDataService
from services.health import HealthCheckService
from domain.disasters import DisasterService

# OpenAPI info
info = Info(
    title="Crisis Check-in API",
    version="1.0.0",
    description="Disaster registration and volunteer assignment API with HAL responses"
)

health_tag = Tag(name="Health", description="System health and status")


def load_config() -> Dict[str, Any]:
    """Read application configuration from the environment."""
    environment = os.getenv('ENVIRONMENT', 'development')
    return {
        'ENVIRONMENT': environment,
        'DEBUG': environment == 'development',
        'DOCS_ENABLED': os.getenv('DOCS_ENABLED', 'true').lower() == 'true',
        'OTEL_ENABLED': os.getenv('OTEL_ENABLED', 'true').lower() == 'true',
        'SERVICE_VERSION': os.getenv('SERVICE_VERSION', '1.0.0'),
        # Data store configuration
        'DATA_BACKEND': os.getenv('DATA_BACKEND', 'mongodb').lower(),
        'MONGODB_URI': os.getenv('MONGODB_URI', 'mongodb://localhost:27017/crisischeckin_dev'),
        'MONGODB_DATABASE': os.getenv('MONGODB_DATABASE', 'crisischeckin_dev'),
        # API configuration
        'BASE_URL': os.getenv('BASE_URL', 'http://localhost:5000')
    }


def create_data_service(config: Dict[str, Any]) -> DataService:
    """Build the data store selected by DATA_BACKEND."""
    backend = config['DATA_BACKEND']
    if backend == 'memory':
        return InMemoryDataService()
    if backend == 'mongodb':
        return MongoDataService(MongoDBService(config['MONGODB_URI'], config['MONGODB_DATABASE']))
    raise ValueError(f"Unknown DATA_BACKEND: {backend}")


def create_app(
    data_service: Optional[DataService] = None,
    config_overrides: Optional[Dict[str, Any]] = None
) -> OpenAPI:
    """
    Build the Flask application.

    Args:
        data_service: Data store to use instead of the configured backend
        config_overrides: Values replacing the environment configuration

    Returns:
        Configured application
    """
    config = load_config()
    config.update(config_overrides or {})

    app = OpenAPI(__name__, info=info, doc_ui=config['DOCS_ENABLED'])
    app.config.update(config)

    # Add observability middleware
    add_observability_middleware(app)

    # Initialize services
    if data_service is None:
        data_service = create_data_service(config)
    hal_formatter = create_hal_formatter(config['BASE_URL'])
    health_service = HealthCheckService(data_service, config['SERVICE_VERSION'])

    # Initialize middleware
    ErrorHandlerMiddleware(app, hal_formatter)

    # Make services available to routes
    app.data_service = data_service
    app.disaster_service = DisasterService(data_service)
    app.hal_formatter = hal_formatter
    app.health_service = health_service

    # Register routes
    from routes.disasters import disasters_bp
    from routes.volunteers import volunteers_bp

    app.register_api(disasters_bp)
    app.register_api(volunteers_bp)

    @app.get('/api/healthz', tags=[health_tag])
    def health_check():
        """Health check endpoint reporting data store status"""
        try:
            health_data = health_service.get_comprehensive_health()
            status_code = 200 if health_data["status"] == "healthy" else 503

        except Exception as e:
            # Fallback health response if health service fails
            health_data = {
                "status": "unhealthy",
                "service": "crisischeckin-api",
                "version": config['SERVICE_VERSION'],
                "environment": config['ENVIRONMENT'],
                "timestamp": datetime.utcnow().isoformat() + "Z",
                "error": f"Health check service failed: {str(e)}"
            }
            status_code = 503

        health_response = hal_formatter.builder.build_resource_response(health_data, "healthz")
        return jsonify(health_response), status_code

    return app


# Initialize observability first
setup_observability()

app = create_app()


if __name__ == '__main__':
    # Development server
    app.run(
        host='0.0.0.0',
        port=int(os.getenv('PORT', 5000)),
        debug=app.config['DEBUG']
    )
