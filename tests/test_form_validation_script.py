"""
Client-side live validation script, run under Node against a stub DOM.
"""
import json
import shutil
import subprocess
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SCRIPT = ROOT / "posts" / "static" / "posts" / "js" / "form_validation.js"
HARNESS = ROOT / "tests" / "js" / "form_validation_harness.js"

NODE = shutil.which("node")

pytestmark = pytest.mark.skipif(NODE is None, reason="node is not installed")


def run_script(scenario, input_id="post_title"):
    completed = subprocess.run(
        [NODE, str(HARNESS), str(SCRIPT), scenario, input_id],
        capture_output=True,
        text=True,
        timeout=30,
        check=True,
    )
    return json.loads(completed.stdout)


def test_change_posts_the_whole_form_once():
    report = run_script("ok")

    assert report["fetchCalls"] == [{
        "url": "/form_validations/posts/",
        "method": "POST",
        "bodyIsWholeForm": True,
        "requestedWith": "XMLHttpRequest",
    }]


def test_success_replaces_output_and_refocuses_input():
    report = run_script("ok", "post_body")

    assert report["output"] == "<p>NEW FIELDS</p>"
    assert report["focused"] == "post_body"


@pytest.mark.parametrize("scenario", ["http_error", "reject"])
def test_failure_leaves_page_untouched_without_retry(scenario):
    completed = subprocess.run(
        [NODE, str(HARNESS), str(SCRIPT), scenario],
        capture_output=True,
        text=True,
        timeout=30,
    )

    assert completed.returncode == 0
    assert completed.stderr == ""
    report = json.loads(completed.stdout)
    assert len(report["fetchCalls"]) == 1
    assert report["output"] == "ORIGINAL"
    assert report["focused"] is None


def test_input_without_id_still_submits():
    report = run_script("ok", "")

    assert len(report["fetchCalls"]) == 1
    assert report["output"] == "<p>NEW FIELDS</p>"
    assert report["focused"] is None
