# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Disaster endpoints: registration, listing and volunteer assignment.
"""

from flask import jsonify, current_app, request
from flask_openapi3 import APIBlueprint, Tag
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
import logging

from models.entities import Disaster
from models.requests import DisasterPath, CreateDisasterRequest, AssignVolunteerRequest
from models.responses import DisasterResponse, CommitmentResponse, ErrorResponse
from domain.exceptions import NotFoundException

# Set up logging and tracing
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

disaster_tag = Tag(name="Disasters", description="Disaster registration and volunteer assignment")
disasters_bp = APIBlueprint(
    'disasters',
    __name__,
    url_prefix='/api',
    abp_tags=[disaster_tag]
)


@disasters_bp.get('/disasters')
def list_disasters():
    """
    List all disasters.

    Returns every registered disaster, active or not, in data store order.
    """
    with tracer.start_as_current_span("disasters.list") as span:
        disasters = current_app.disaster_service.get_list()
        span.set_attribute("disasters.count", len(disasters))

        logger.info("Disasters listed", extra={"total_count": len(disasters)})
        return jsonify(current_app.hal_formatter.format_disaster_collection(disasters, request.path)), 200


@disasters_bp.get('/disasters/active')
def list_active_disasters():
    """
    List disasters accepting volunteers.
    """
    with tracer.start_as_current_span("disasters.list_active") as span:
        disasters = current_app.disaster_service.get_active_list()
        span.set_attribute("disasters.count", len(disasters))

        return jsonify(current_app.hal_formatter.format_disaster_collection(disasters, request.path)), 200


@disasters_bp.get('/disasters/<int:disaster_id>', responses={200: DisasterResponse, 404: ErrorResponse})
def get_disaster(path: DisasterPath):
    """
    Get disaster by ID.
    """
    with tracer.start_as_current_span(
        "disasters.get",
        attributes={"disaster.id": path.disaster_id}
    ) as span:
        disaster = current_app.disaster_service.get(path.disaster_id)
        if disaster is None:
            span.set_status(Status(StatusCode.ERROR, "Disaster not found"))
            raise NotFoundException(f"Disaster {path.disaster_id} not found")

        return jsonify(current_app.hal_formatter.format_disaster(disaster)), 200


@disasters_bp.post('/disasters', responses={201: DisasterResponse, 400: ErrorResponse})
def create_disaster(body: CreateDisasterRequest):
    """
    Register a new disaster.

    The disaster name must not be empty.
    """
    with tracer.start_as_current_span("disasters.create") as span:
        disaster = current_app.disaster_service.create(
            Disaster(name=body.name, is_active=body.is_active)
        )
        span.set_attribute("disaster.id", disaster.id)
        span.set_status(Status(StatusCode.OK))

        return jsonify(current_app.hal_formatter.format_disaster(disaster)), 201


@disasters_bp.get('/disasters/<int:disaster_id>/commitments')
def list_disaster_commitments(path: DisasterPath):
    """
    List volunteer commitments made to a disaster.
    """
    with tracer.start_as_current_span(
        "disasters.commitments.list",
        attributes={"disaster.id": path.disaster_id}
    ):
        commitments = current_app.disaster_service.get_commitments_for_disaster(path.disaster_id)
        return jsonify(current_app.hal_formatter.format_commitment_collection(commitments, request.path)), 200


@disasters_bp.post(
    '/disasters/<int:disaster_id>/commitments',
    responses={201: CommitmentResponse, 400: ErrorResponse, 409: ErrorResponse}
)
def assign_volunteer(path: DisasterPath, body: AssignVolunteerRequest):
    """
    Assign a volunteer to a disaster for an inclusive date range.

    Rejected with 400 when the range is reversed and with 409 when the
    volunteer already holds a commitment on any of the days.
    """
    with tracer.start_as_current_span(
        "disasters.commitments.assign",
        attributes={
            "disaster.id": path.disaster_id,
            "volunteer.id": body.person_id
        }
    ) as span:
        commitment = current_app.disaster_service.assign_to_volunteer(
            path.disaster_id,
            body.person_id,
            body.start_date,
            body.end_date
        )
        span.set_status(Status(StatusCode.OK))

        return jsonify(current_app.hal_formatter.format_commitment(commitment)), 201
