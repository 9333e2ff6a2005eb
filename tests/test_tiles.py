from wellness.evaluation.coverage import COVERED, GAP, WIP, CoverageMap
from wellness.evaluation.tiles import partition_tiles, project_tiles


def _coverage(education=None):
    return CoverageMap(
        medical=COVERED,
        income=GAP,
        retirement=WIP,
        emergency=COVERED,
        debt=GAP,
        education=education,
    )


def test_fixed_order_without_education():
    tiles = project_tiles(_coverage())
    assert [t.category for t in tiles] == ["medical", "income", "retirement", "emergency", "debt"]


def test_education_sits_after_retirement():
    tiles = project_tiles(_coverage(education=WIP))
    assert [t.category for t in tiles] == ["medical", "income", "retirement", "education", "emergency", "debt"]
    assert tiles[3].label == "Education"


def test_partition_keeps_order():
    covered, needs_attention = partition_tiles(project_tiles(_coverage(education=COVERED)))

    assert [t.category for t in covered] == ["medical", "education", "emergency"]
    assert [t.category for t in needs_attention] == ["income", "retirement", "debt"]


def test_tile_dict():
    tile = project_tiles(_coverage())[1]
    assert tile.to_dict() == {
        "category": "income",
        "label": "Income Protection",
        "state": "gap",
        "stateLabel": "Gap",
    }
