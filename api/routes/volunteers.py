# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Volunteer endpoints.
"""

from flask import jsonify, current_app, request
from flask_openapi3 import APIBlueprint, Tag
from opentelemetry import trace

from models.requests import VolunteerPath

tracer = trace.get_tracer(__name__)

volunteer_tag = Tag(name="Volunteers", description="Volunteer commitments")
volunteers_bp = APIBlueprint(
    'volunteers',
    __name__,
    url_prefix='/api/volunteers',
    abp_tags=[volunteer_tag]
)


@volunteers_bp.get('/<int:person_id>/commitments')
def list_volunteer_commitments(path: VolunteerPath):
    """
    List every commitment a volunteer holds, across all disasters.
    """
    with tracer.start_as_current_span(
        "volunteers.commitments.list",
        attributes={"volunteer.id": path.person_id}
    ) as span:
        commitments = current_app.disaster_service.get_commitments_for_volunteer(path.person_id)
        span.set_attribute("commitments.count", len(commitments))

        return jsonify(current_app.hal_formatter.format_commitment_collection(commitments, request.path)), 200
