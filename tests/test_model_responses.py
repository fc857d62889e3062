"""Tests for parsing model replies."""

import pytest

from meal_plan_engine.containers import EngineContainer
from meal_plan_engine.services.responses import parse_model_response


def test_parses_plain_json() -> None:
    assert parse_model_response('{"days": []}') == {"days": []}


def test_strips_markdown_fences() -> None:
    text = '```json\n{"weeklyPlan": {"days": []}}\n```'

    assert parse_model_response(text) == {"weeklyPlan": {"days": []}}


def test_strips_bare_fences() -> None:
    assert parse_model_response("```\n[1, 2]\n```  ") == [1, 2]


@pytest.mark.parametrize("text", ["", "   ", "```json\n```"])
def test_empty_reply_raises(text: str) -> None:
    with pytest.raises(ValueError, match="empty"):
        parse_model_response(text)


def test_invalid_json_raises_value_error() -> None:
    with pytest.raises(ValueError, match="not valid JSON"):
        parse_model_response('{"days": [')


def test_parsed_reply_feeds_weekly_assembly(container: EngineContainer) -> None:
    text = """```json
    {
      "nutritionPlan": {
        "weeklyPlan": {
          "days": [
            {
              "day": "Lunes",
              "meals": [
                {
                  "name": "Tostadas con huevos",
                  "ingredients": {"protein": "Huevos", "carb": "Pan"},
                  "total": {"calories": 420, "protein": 25}
                }
              ],
              "totals": {"calories": 420, "protein": 25}
            }
          ]
        }
      }
    }
    ```"""

    plan = container.weekly_assembler.assemble_payload(parse_model_response(text))

    assert plan.days[0].day == "monday"
    assert plan.days[0].breakfast[0].foods[2].name == "Verdura"
    assert plan.days[0].total_calories == 420
