"""
Stats Routes

Today's site counters for the admin dashboard and the public tracking hook.
"""

from flask import jsonify

from hertz_admin.stats import stats_bp
from hertz_admin.admin.decorators import admin_required
from hertz_admin.storage import storage
from hertz_admin.utils import json_payload, today_start

# Event type sent by the site -> counter it increments
TRACKED_EVENTS = {
    'visitor': 'visitors',
    'pageview': 'pageviews',
    'calculation': 'calculations',
}


@stats_bp.route('', methods=['GET'])
@admin_required
def get_stats():
    """Today's counters (zero when nothing was tracked yet) and article totals."""
    stats = storage.get_today_stats()
    if stats is not None:
        body = stats.to_dict()
    else:
        body = {
            'id': None,
            'date': today_start().isoformat(),
            'visitors': 0,
            'pageviews': 0,
            'calculations': 0,
        }
    body['articles'] = storage.count_articles()
    body['publishedArticles'] = storage.count_articles(published=True)
    return jsonify(body)


@stats_bp.route('/track', methods=['POST'])
def track():
    """Count one site event: {"type": "visitor" | "pageview" | "calculation"}."""
    payload = json_payload()
    event = payload.get('type')
    counter = TRACKED_EVENTS.get(event) if isinstance(event, str) else None
    if counter is None:
        return jsonify({
            'message': 'Unknown event type',
            'allowed': sorted(TRACKED_EVENTS),
        }), 400

    stats = storage.update_stats({counter: 1})
    return jsonify(stats.to_dict())
