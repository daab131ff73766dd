"""
Recommendations Module Summary
==============================

Turns the trail catalogue into a personal discovery feed.

1. TrailScorer - additive relevance score against stored preferences
2. ranking - stable ranking and 1-indexed pagination
3. TrailCardService - profile lookup, filter, score, rank, paginate
4. REST endpoint for trail cards
"""
