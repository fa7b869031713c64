from garden import load_layout_csv, load_plan_json, save_layout_csv, save_plan_json


def test_layout_csv_round_trip(tmp_path):
    layout = [["tomato", None, True], [None, "basil", None]]
    path = tmp_path / "beds" / "bed.csv"
    save_layout_csv(layout, str(path))
    assert path.read_text().splitlines() == ["tomato,.,#", ".,basil,."]
    assert load_layout_csv(str(path)) == layout


def test_layout_csv_hand_written(tmp_path):
    path = tmp_path / "bed.csv"
    path.write_text("#,, lettuce \n\n.,#,\n")
    assert load_layout_csv(str(path)) == [[True, None, "lettuce"], [None, True, None]]


def test_plan_json_round_trip(tmp_path):
    plan = {
        "grid": [[{"type": "blocked"}, {"type": "empty"}]],
        "rows": 1,
        "cols": 2,
        "score": 0,
        "warnings": ["1 empty cell(s): not enough compatible varieties to fill the entire grid."],
    }
    path = tmp_path / "plan.json"
    save_plan_json(plan, str(path))
    assert load_plan_json(str(path)) == plan
