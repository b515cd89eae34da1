# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
HAL (Hypertext Application Language) response formatting utilities.
Implements HATEOAS responses with state-dependent affordance links.
"""

from typing import Dict, List, Any, Optional
from urllib.parse import urljoin

from models.entities import Commitment, Disaster
from models.responses import HalLink

PROBLEM_BASE_URL = "https://api.crisischeckin.org/problems"


class HalLinkBuilder:
    """Builder for HAL links with proper URL construction."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip('/') + '/'

    def build_link(
        self,
        path: str,
        method: str = "GET",
        content_type: Optional[str] = None,
        title: Optional[str] = None,
        templated: bool = False
    ) -> HalLink:
        """Build a HAL link with proper URL construction."""
        href = urljoin(self.base_url, path.lstrip('/'))

        return HalLink(
            href=href,
            method=method,
            type=content_type,
            title=title,
            templated=templated
        )

    def build_self_link(self, resource_path: str) -> HalLink:
        """Build self link for a resource."""
        return self.build_link(resource_path, title="Self")

    def build_collection_link(self, collection_path: str) -> HalLink:
        """Build link to parent collection."""
        return self.build_link(collection_path, title="Collection")


class AffordanceLinkBuilder:
    """Builder for affordance links that depend on resource state."""

    def __init__(self, base_url: str):
        self.link_builder = HalLinkBuilder(base_url)

    def build_disaster_affordances(self, disaster_id: int, is_active: bool) -> Dict[str, HalLink]:
        """Build links for a disaster; only active disasters offer volunteer assignment."""
        links = {}
        base_path = f"/api/disasters/{disaster_id}"

        links['self'] = self.link_builder.build_self_link(base_path)
        links['collection'] = self.link_builder.build_collection_link("/api/disasters")
        links['commitments'] = self.link_builder.build_link(
            f"{base_path}/commitments",
            title="Volunteer commitments"
        )

        if is_active:
            links['assign'] = self.link_builder.build_link(
                f"{base_path}/commitments",
                method="POST",
                content_type="application/json",
                title="Assign volunteer"
            )

        return links

    def build_commitment_affordances(self, person_id: int, disaster_id: int) -> Dict[str, HalLink]:
        """Build links from a commitment to its disaster and volunteer."""
        return {
            'disaster': self.link_builder.build_link(f"/api/disasters/{disaster_id}", title="Disaster"),
            'volunteer': self.link_builder.build_link(
                f"/api/volunteers/{person_id}/commitments",
                title="Volunteer commitments"
            )
        }


class HalResponseBuilder:
    """Main HAL response builder."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip('/')
        self.link_builder = HalLinkBuilder(base_url)
        self.affordance_builder = AffordanceLinkBuilder(base_url)

    def build_resource_response(
        self,
        data: Dict[str, Any],
        resource_type: str,
        resource_id: Any = None
    ) -> Dict[str, Any]:
        """Build a HAL resource response with appropriate affordance links."""
        response = dict(data)

        if resource_type == "disaster":
            links = self.affordance_builder.build_disaster_affordances(
                resource_id,
                bool(data.get('is_active'))
            )
        elif resource_type == "commitment":
            links = self.affordance_builder.build_commitment_affordances(
                data['person_id'],
                data['disaster_id']
            )
        else:
            links = {'self': self.link_builder.build_self_link(f"/api/{resource_type}")}

        response['_links'] = {rel: link.model_dump(exclude_none=True) for rel, link in links.items()}
        return response

    def build_collection_response(
        self,
        items: List[Dict[str, Any]],
        collection_path: str,
        embedded_key: str
    ) -> Dict[str, Any]:
        """Build a HAL collection response embedding every item."""
        links = {'self': self.link_builder.build_self_link(collection_path)}

        return {
            'total': len(items),
            '_links': {rel: link.model_dump(exclude_none=True) for rel, link in links.items()},
            '_embedded': {
                embedded_key: items
            }
        }

    def build_error_response(
        self,
        error_type: str,
        title: str,
        status: int,
        detail: str,
        instance: str,
        validation_errors: Optional[List[Dict[str, Any]]] = None
    ) -> Dict[str, Any]:
        """Build RFC 7807 compliant error response with HAL links."""
        error_response = {
            'type': f"{PROBLEM_BASE_URL}/{error_type}",
            'title': title,
            'status': status,
            'detail': detail,
            'instance': instance
        }

        if validation_errors:
            error_response['errors'] = validation_errors

        links = {
            'help': self.link_builder.build_link(
                f"/docs/errors#{error_type}",
                title="Error documentation"
            )
        }

        if error_type == "validation-error":
            links['schema'] = self.link_builder.build_link(
                "/openapi/openapi.json",
                title="API schema"
            )
        elif error_type == "resource-not-found":
            links['collection'] = self.link_builder.build_collection_link("/api/disasters")

        error_response['_links'] = {rel: link.model_dump(exclude_none=True) for rel, link in links.items()}
        return error_response


class HalFormatter:
    """High-level HAL formatter with convenience methods."""

    def __init__(self, base_url: str):
        self.builder = HalResponseBuilder(base_url)

    def format_disaster(self, disaster: Disaster) -> Dict[str, Any]:
        """Format a disaster with HAL links."""
        return self.builder.build_resource_response(
            disaster.model_dump(mode='json'),
            "disaster",
            disaster.id
        )

    def format_disaster_collection(self, disasters: List[Disaster], collection_path: str) -> Dict[str, Any]:
        """Format a list of disasters with HAL links."""
        return self.builder.build_collection_response(
            [self.format_disaster(disaster) for disaster in disasters],
            collection_path,
            "disasters"
        )

    def format_commitment(self, commitment: Commitment) -> Dict[str, Any]:
        """Format a commitment with HAL links."""
        return self.builder.build_resource_response(
            commitment.model_dump(mode='json'),
            "commitment"
        )

    def format_commitment_collection(self, commitments: List[Commitment], collection_path: str) -> Dict[str, Any]:
        """Format a list of commitments with HAL links."""
        return self.builder.build_collection_response(
            [self.format_commitment(commitment) for commitment in commitments],
            collection_path,
            "commitments"
        )

    def format_validation_error(
        self,
        detail: str,
        instance: str,
        validation_errors: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Format a validation error response."""
        return self.builder.build_error_response(
            "validation-error",
            "Validation Error",
            400,
            detail,
            instance,
            validation_errors
        )

    def format_not_found_error(
        self,
        detail: str,
        instance: str
    ) -> Dict[str, Any]:
        """Format a not found error response."""
        return self.builder.build_error_response(
            "resource-not-found",
            "Resource Not Found",
            404,
            detail,
            instance
        )

    def format_conflict_error(
        self,
        detail: str,
        instance: str
    ) -> Dict[str, Any]:
        """Format a conflict error response."""
        return self.builder.build_error_response(
            "resource-conflict",
            "Resource Conflict",
            409,
            detail,
            instance
        )

    def format_server_error(
        self,
        detail: str,
        instance: str
    ) -> Dict[str, Any]:
        """Format a server error response."""
        return self.builder.build_error_response(
            "internal-server-error",
            "Internal Server Error",
            500,
            detail,
            instance
        )

    def format_service_unavailable_error(
        self,
        detail: str,
        instance: str
    ) -> Dict[str, Any]:
        """Format a service unavailable error response."""
        return self.builder.build_error_response(
            "service-unavailable",
            "Service Unavailable",
            503,
            detail,
            instance
        )


# Convenience function for creating HAL formatter
def create_hal_formatter(base_url: str) -> HalFormatter:
    """Create a HAL formatter instance."""
    return HalFormatter(base_url)
