from procargs import const, options


def test_resolve_defaults():
    opts = options.Options.resolve()
    assert opts.tokens == ()
    assert opts.prefixes == ("--", "-")
    assert opts.delimiters == (":", "=")
    assert opts.keepPositionalIndices is False
    assert opts.valueCoercer is None


def test_resolve_argv():
    opts = options.Options.resolve(None, argv=["-a", "b"])
    assert opts.tokens == ("-a", "b")

    opts = options.Options.resolve({"tokens": ["x"]}, argv=["-a", "b"])
    assert opts.tokens == ("x",)


def test_resolve_filters_non_strings():
    opts = options.Options.resolve(
        {
            "tokens": ["a", 1, None, "b"],
            "prefixes": ["/", 2],
            "delimiters": [3, "="],
        }
    )
    assert opts.tokens == ("a", "b")
    assert opts.prefixes == ("/",)
    assert opts.delimiters == ("=",)


def test_resolve_wrong_types():
    opts = options.Options.resolve(
        {
            "prefixes": "--",
            "delimiters": None,
            "keepPositionalIndices": "yes",
            "valueCoercer": "int",
            "unknown": True,
        }
    )
    assert opts.prefixes == const.DEFAULT_PREFIXES
    assert opts.delimiters == const.DEFAULT_DELIMITERS
    assert opts.keepPositionalIndices is False
    assert opts.valueCoercer is None


def test_resolve_keeps_valid_fields():
    def lookup(ident):
        return None

    opts = options.Options.resolve({"keepPositionalIndices": True, "valueCoercer": lookup})
    assert opts.keepPositionalIndices is True
    assert opts.valueCoercer is lookup


def test_resolve_options_passthrough():
    opts = options.Options(tokens=("a",))
    assert options.Options.resolve(opts, argv=["b"]) is opts


def test_with_tokens():
    opts = options.Options(prefixes=("/",)).withTokens(["a", 1, "b"])
    assert opts.tokens == ("a", "b")
    assert opts.prefixes == ("/",)


def test_direct_construction_filters():
    opts = options.Options(
        tokens=["a", 1],
        prefixes=("--", 5),
        delimiters="=",
        keepPositionalIndices=1,
        valueCoercer=42,
    )
    assert opts.tokens == ("a",)
    assert opts.prefixes == ("--",)
    assert opts.delimiters == const.DEFAULT_DELIMITERS
    assert opts.keepPositionalIndices is False
    assert opts.valueCoercer is None


def test_resolve_options_without_tokens():
    opts = options.Options.resolve(options.Options(prefixes=("/",)), argv=["/a", "b"])
    assert opts.tokens == ("/a", "b")
    assert opts.prefixes == ("/",)
