#!/usr/bin/env python3
"""Demo-Requests gegen einen laufenden Server (uvicorn writecheck.server:app)."""

import json
import sys

import requests

BASE_URL = "http://localhost:8000"

draft = (
    "The report was written by the team. I think think the results are good. "
    "Our experiment was sooooo successful that we repeated it twice."
)
criteria = [
    "Uses complete sentences",
    "Explains the results with evidence",
    "Avoids repetition",
]

print("=" * 70)
print("INPUT:")
print("=" * 70)
print(json.dumps({"draft": draft, "criteria": criteria}, indent=2, ensure_ascii=False))
print()

try:
    analysis = requests.post(f"{BASE_URL}/api/analysis", json={"draft": draft}, timeout=10)
    analysis.raise_for_status()
except requests.exceptions.ConnectionError:
    print(f"❌ Server nicht erreichbar unter {BASE_URL}")
    print("   Bitte starten Sie den Server mit: uvicorn writecheck.server:app")
    sys.exit(1)

snapshot = analysis.json()
metrics = snapshot["metrics"]

print("=" * 70)
print("OUTPUT: WRITING ANALYTICS")
print("=" * 70)
print(f"  Words:        {metrics['word_count']}")
print(f"  Sentences:    {metrics['sentence_count']}")
print(f"  Avg. length:  {metrics['avg_sentence_length']}")
print(f"  Reading time: {metrics['reading_time']}")
print()
print(f"  Issues ({snapshot['issues']['total']}):")
for kind, items in snapshot["issues"]["issues"].items():
    for issue in items:
        where = f"Sentence {issue['sentence_index']}" if issue["sentence_index"] else "Draft"
        print(f"    [{kind}] {where}: {issue['excerpt']}")
print()

response = requests.post(
    f"{BASE_URL}/api/analyse",
    json={"draft": draft, "criteria": criteria},
    timeout=120,
)
body = response.json()

print("=" * 70)
print("OUTPUT: AI FEEDBACK")
print("=" * 70)
if not body.get("success"):
    print(f"❌ {body.get('code')}: {body.get('error')}")
    sys.exit(1)

for item in body["data"]["criteria"]:
    print(f"  {item['criterionNumber']}. {item['criterion']}")
    print(f"     Rating:   {item['rating']}")
    print(f"     Feedback: {item['feedback']}")
print()
for point in body["data"]["summary"]:
    print(f"  - {point}")
