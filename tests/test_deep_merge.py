from fuzzdata.config import ConfigModel
from fuzzdata.config.schema import deep_merge_dicts, load_config


def _defaults() -> dict:
    return {
        "schema_version": 1,
        "sampling": {"seed_env": "FUZZDATA_SEED", "seed": None},
        "tables": {"tlds": ["com", "org"], "subdomains": ["example", "test"]},
    }


def test_nested_seed_keeps_seed_env() -> None:
    merged = deep_merge_dicts(_defaults(), {"sampling": {"seed": 17}})
    assert merged["sampling"] == {"seed_env": "FUZZDATA_SEED", "seed": 17}
    assert merged["tables"]["tlds"] == ["com", "org"]


def test_table_lists_are_replaced_wholesale() -> None:
    base = _defaults()
    merged = deep_merge_dicts(base, {"tables": {"tlds": ["zz"]}})
    assert merged["tables"]["tlds"] == ["zz"]
    assert merged["tables"]["subdomains"] == ["example", "test"]
    assert base["tables"]["tlds"] == ["com", "org"]


def test_merged_defaults_still_validate() -> None:
    defaults = load_config(env={}).model_dump()
    merged = deep_merge_dicts(defaults, {"sampling": {"seed": 5}, "tables": {"tlds": ["zz"]}})
    cfg = ConfigModel.model_validate(merged)
    assert cfg.sampling.seed == 5
    assert cfg.sampling.seed_env == "FUZZDATA_SEED"
    assert cfg.tables.tlds == ["zz"]
    assert len(cfg.tables.netmasks) == 33
