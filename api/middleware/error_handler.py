# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Error handling middleware rendering failures as HAL problem documents.

Domain exceptions carry their own status code and problem type. Routing
errors raised by Flask (unknown paths, unsupported methods) and anything
unexpected are mapped here.
"""

from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException
from opentelemetry import trace
import logging

from services.hal import HalFormatter
from domain.exceptions import (
    CustomException,
    ValidationException,
    NotFoundException,
    ConflictException,
    ServiceUnavailableException
)

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

# Problem types for errors Flask raises while routing
ROUTING_PROBLEM_TYPES = {
    404: "resource-not-found",
    405: "method-not-allowed"
}


class ErrorHandlerMiddleware:
    """Registers the application's error handlers on a Flask app."""

    def __init__(self, app: Flask, hal_formatter: HalFormatter):
        self.app = app
        self.hal_formatter = hal_formatter
        self.register_error_handlers()

    def register_error_handlers(self):
        """Register error handlers with Flask application."""

        @self.app.errorhandler(CustomException)
        def handle_custom_exception(error: CustomException):
            return self.handle_domain_error(error)

        @self.app.errorhandler(HTTPException)
        def handle_http_exception(error: HTTPException):
            return self.handle_routing_error(error)

        @self.app.errorhandler(Exception)
        def handle_generic_exception(error: Exception):
            return self.handle_unexpected_error(error)

    def handle_domain_error(self, error: CustomException):
        """Render a disaster or data store exception with its own status."""
        with tracer.start_as_current_span("error_handler.domain_error") as span:
            span.set_attributes({
                "error.type": error.error_type,
                "error.status": error.status_code,
                "http.method": request.method,
                "http.path": request.path
            })

            logger.warning(
                f"Request rejected: {error.error_type}",
                extra={
                    "error_type": error.error_type,
                    "status_code": error.status_code,
                    "error_message": error.message,
                    "path": request.path,
                    "method": request.method
                }
            )

            if isinstance(error, ValidationException):
                body = self.hal_formatter.format_validation_error(
                    error.message,
                    request.path,
                    error.validation_errors
                )
            elif isinstance(error, NotFoundException):
                body = self.hal_formatter.format_not_found_error(error.message, request.path)
            elif isinstance(error, ConflictException):
                body = self.hal_formatter.format_conflict_error(error.message, request.path)
            elif isinstance(error, ServiceUnavailableException):
                body = self.hal_formatter.format_service_unavailable_error(error.message, request.path)
            else:
                body = self.hal_formatter.format_server_error(error.message, request.path)

            return jsonify(body), error.status_code

    def handle_routing_error(self, error: HTTPException):
        """Render an HTTP error raised by Flask, e.g. an unknown path."""
        error_type = ROUTING_PROBLEM_TYPES.get(error.code, "http-error")
        detail = str(error.description) if error.description else error.name

        logger.warning(
            f"HTTP error: {error.name}",
            extra={
                "error_type": error_type,
                "status_code": error.code,
                "path": request.path,
                "method": request.method
            }
        )

        body = self.hal_formatter.builder.build_error_response(
            error_type,
            error.name,
            error.code,
            detail,
            request.path
        )
        return jsonify(body), error.code

    def handle_unexpected_error(self, error: Exception):
        """Render any other exception as a 500, hiding details in production."""
        with tracer.start_as_current_span("error_handler.unexpected_error") as span:
            span.set_attributes({
                "error.class": error.__class__.__name__,
                "http.method": request.method,
                "http.path": request.path
            })
            span.record_exception(error)

            logger.error(
                f"Unexpected error: {error.__class__.__name__}",
                extra={
                    "error_class": error.__class__.__name__,
                    "error_message": str(error),
                    "path": request.path,
                    "method": request.method
                },
                exc_info=True
            )

            detail = "An unexpected error occurred"
            if self.app.config.get('ENVIRONMENT') != 'production':
                detail = f"{error.__class__.__name__}: {error}"

            return jsonify(self.hal_formatter.format_server_error(detail, request.path)), 500
