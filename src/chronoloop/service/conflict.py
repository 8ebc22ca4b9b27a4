# SPDX-License-Identifier: MIT

from chronoloop.model.timeline_item import ConflictCandidate, TimelineItem


def detect_conflicts(
    items: list[TimelineItem], candidate: ConflictCandidate
) -> list[TimelineItem]:
    """
    Return the items whose [start, end) interval overlaps the candidate's.

    Only true intervals take part: a candidate or item without an end time,
    or with a zero-length span, never conflicts. Back-to-back intervals
    share a boundary but do not overlap. The candidate's own id is skipped.
    """
    candidate_start = candidate.get("start_time")
    candidate_end = candidate.get("end_time")
    if candidate_start is None or candidate_end is None:
        return []
    if candidate_end <= candidate_start:
        return []

    candidate_id = candidate.get("id")
    conflicts: list[TimelineItem] = []
    for item in items:
        if candidate_id is not None and item["id"] == candidate_id:
            continue
        item_end = item["end_time"]
        if item_end is None or item_end <= item["start_time"]:
            continue
        if candidate_start < item_end and item["start_time"] < candidate_end:
            conflicts.append(item)
    return conflicts
