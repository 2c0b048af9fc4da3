"""
Map markers for the organisation listing and detail pages.

The client-side map widget consumes a JSON array of objects with
``lat``, ``lng`` and ``infowindow`` keys.  Organisations without both
coordinates are left off the map.
"""
import json

from django.template.loader import render_to_string

from .models import Organisation


def marker_for(organisation):
    return {
        "lat": organisation.latitude,
        "lng": organisation.longitude,
        "infowindow": render_to_string(
            "organisations/_infowindow.html", {"organisation": organisation}
        ),
    }


def map_markers(organisations):
    """Marker dicts for a single organisation or an iterable of them."""
    if isinstance(organisations, Organisation):
        organisations = [organisations]
    return [marker_for(org) for org in organisations if org.has_coordinates]


def build_map_markers(organisations) -> str:
    return json.dumps(map_markers(organisations))
