"""Metrics module for Voice Avatar Proxy."""

from prometheus_client import (
    Counter,
    Histogram,
)

# Counter to track REST API calls
# This will be used to count how many times each API endpoint is called
# and the status code of the response
rest_api_calls_total = Counter(
    "vap_rest_api_calls_total", "REST API calls counter", ["path", "status_code"]
)

# Histogram to measure response durations
# This will be used to track how long it takes to handle requests
response_duration_seconds = Histogram(
    "vap_response_duration_seconds", "Response durations", ["path"]
)

# Metric that counts how many LLM calls were made for each model
llm_calls_total = Counter("vap_llm_calls_total", "LLM calls counter", ["model"])

# Metric that counts how many LLM calls failed
llm_calls_failures_total = Counter("vap_llm_calls_failures_total", "LLM calls failures")

# Generated replies served from cache vs. fetched from the model
reply_cache_hits_total = Counter("vap_reply_cache_hits_total", "Reply cache hits")
reply_cache_misses_total = Counter(
    "vap_reply_cache_misses_total", "Reply cache misses"
)

# Talk submission attempts, labelled by fallback tier and outcome
talk_submission_attempts_total = Counter(
    "vap_talk_submission_attempts_total",
    "Talk submission attempts",
    ["tier", "outcome"],
)

# Talk status polls, labelled by endpoint (modern or legacy)
talk_status_polls_total = Counter(
    "vap_talk_status_polls_total", "Talk status polls", ["endpoint", "outcome"]
)

# Finished talk jobs, labelled by outcome: done, error or timeout
talk_jobs_total = Counter("vap_talk_jobs_total", "Finished talk jobs", ["outcome"])
