# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for middleware functionality.
"""

import pytest
from flask import Flask, abort

from middleware.error_handler import ErrorHandlerMiddleware
from domain.exceptions import (
    CustomException,
    ValidationException,
    MissingArgumentException,
    NotFoundException,
    ConflictException,
    ServiceUnavailableException
)
from services.hal import HalFormatter, PROBLEM_BASE_URL


def build_app(environment: str = 'test') -> Flask:
    """Flask app with error handlers and routes raising each error kind."""
    app = Flask(__name__)
    app.config['ENVIRONMENT'] = environment
    hal_formatter = HalFormatter("https://api.example.com")

    ErrorHandlerMiddleware(app, hal_formatter)

    @app.route('/validation')
    def validation_error():
        raise ValidationException("Invalid input", [{"field": "name", "message": "required"}])

    @app.route('/missing')
    def missing_argument():
        raise MissingArgumentException("name")

    @app.route('/not-found')
    def not_found():
        raise NotFoundException("Disaster 9 not found")

    @app.route('/conflict')
    def conflict():
        raise ConflictException("Already committed")

    @app.route('/unavailable')
    def unavailable():
        raise ServiceUnavailableException("Data store unavailable")

    @app.route('/custom')
    def custom():
        raise CustomException("Something custom")

    @app.route('/unexpected')
    def unexpected():
        raise RuntimeError("boom")

    @app.route('/unsupported', methods=['POST'])
    def unsupported():
        abort(415)

    return app


@pytest.fixture
def error_client():
    """Test client for an app with error handlers."""
    return build_app().test_client()


class TestCustomErrorHandlers:
    """Test application exceptions are rendered as problem documents."""

    def test_validation_exception(self, error_client):
        """Test validation errors become 400 responses with field errors."""
        response = error_client.get('/validation')

        assert response.status_code == 400
        data = response.get_json()
        assert data["type"] == f"{PROBLEM_BASE_URL}/validation-error"
        assert data["detail"] == "Invalid input"
        assert data["errors"] == [{"field": "name", "message": "required"}]
        assert data["instance"] == "/validation"

    def test_missing_argument(self, error_client):
        """Test missing arguments are reported as validation errors."""
        response = error_client.get('/missing')

        assert response.status_code == 400
        data = response.get_json()
        assert data["detail"] == "Argument 'name' is required"
        assert data["errors"][0]["field"] == "name"

    def test_not_found_exception(self, error_client):
        """Test not found errors become 404 responses."""
        response = error_client.get('/not-found')

        assert response.status_code == 404
        assert response.get_json()["type"] == f"{PROBLEM_BASE_URL}/resource-not-found"

    def test_conflict_exception(self, error_client):
        """Test conflicts become 409 responses."""
        response = error_client.get('/conflict')

        assert response.status_code == 409
        assert response.get_json()["title"] == "Resource Conflict"

    def test_service_unavailable_exception(self, error_client):
        """Test unavailable dependencies become 503 responses."""
        response = error_client.get('/unavailable')

        assert response.status_code == 503
        assert response.get_json()["type"] == f"{PROBLEM_BASE_URL}/service-unavailable"

    def test_generic_custom_exception(self, error_client):
        """Test other application exceptions become server errors."""
        response = error_client.get('/custom')

        assert response.status_code == 500
        assert response.get_json()["detail"] == "Something custom"


class TestErrorHandlerMiddleware:
    """Test HTTP and unexpected error handling."""

    def test_unknown_route(self, error_client):
        """Test unknown routes get a not found problem document."""
        response = error_client.get('/does-not-exist')

        assert response.status_code == 404
        data = response.get_json()
        assert data["type"] == f"{PROBLEM_BASE_URL}/resource-not-found"
        assert data["instance"] == "/does-not-exist"

    def test_method_not_allowed(self, error_client):
        """Test unsupported methods get a 405 problem document."""
        response = error_client.post('/conflict')

        assert response.status_code == 405
        assert response.get_json()["type"] == f"{PROBLEM_BASE_URL}/method-not-allowed"

    def test_other_http_errors(self, error_client):
        """Test other HTTP errors get a generic problem type with their own title."""
        response = error_client.post('/unsupported')

        assert response.status_code == 415
        data = response.get_json()
        assert data["type"] == f"{PROBLEM_BASE_URL}/http-error"
        assert data["title"] == "Unsupported Media Type"

    def test_unexpected_error_details_outside_production(self, error_client):
        """Test unexpected errors include details outside production."""
        response = error_client.get('/unexpected')

        assert response.status_code == 500
        assert response.get_json()["detail"] == "RuntimeError: boom"

    def test_unexpected_error_hidden_in_production(self):
        """Test unexpected error details are hidden in production."""
        client = build_app('production').test_client()

        response = client.get('/unexpected')

        assert response.status_code == 500
        assert response.get_json()["detail"] == "An unexpected error occurred"
