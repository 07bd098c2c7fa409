"""Tests for the pytest plugin, run in a subprocess so sweeps stay isolated."""


def test_spy_fixture_restores_between_tests(pytester):
    pytester.makepyfile(
        helpers="""
        def greet(name):
            return f"hello {name}"
        """,
        test_spies="""
        import helpers
        from mockfn import is_mock_function

        def test_spy_records(spy):
            recorder = spy(helpers, "greet")
            assert helpers.greet("ada") == "hello ada"
            assert recorder.calls[0].args == ("ada",)

        def test_restored_afterwards():
            assert not is_mock_function(helpers.greet)
        """,
    )
    result = pytester.runpytest_subprocess()
    result.assert_outcomes(passed=2)


def test_mock_fn_fixture(pytester):
    pytester.makepyfile(
        """
        def test_factory(mock_fn, mock_registry):
            mock = mock_fn(lambda x: x + 1)
            assert mock(1) == 2
            assert mock in mock_registry
        """
    )
    result = pytester.runpytest_subprocess()
    result.assert_outcomes(passed=1)


def test_reset_mocks_ini_option(pytester):
    pytester.makeini(
        """
        [pytest]
        mockfn_reset_mocks = true
        """
    )
    pytester.makepyfile(
        """
        from mockfn import fn

        shared = fn().mock_return_value(1)

        def test_first():
            assert shared() is None
            shared.mock_return_value(2)
            assert shared() == 2

        def test_second():
            assert shared.calls == []
            assert shared() is None
        """
    )
    result = pytester.runpytest_subprocess()
    result.assert_outcomes(passed=2)


def test_clear_mocks_from_config_file(pytester):
    pytester.makefile(".yaml", mockfn="clear_mocks: true\nlog_level: debug\n")
    pytester.makeini(
        """
        [pytest]
        mockfn_config = mockfn.yaml
        """
    )
    pytester.makepyfile(
        """
        from mockfn import fn

        shared = fn().mock_return_value(1)

        def test_first():
            assert shared() == 1

        def test_second():
            assert shared.calls == []
            assert shared() == 1
        """
    )
    result = pytester.runpytest_subprocess()
    result.assert_outcomes(passed=2)


def test_no_sweeps_by_default(pytester):
    pytester.makepyfile(
        """
        from mockfn import fn

        shared = fn()

        def test_first():
            shared()

        def test_second():
            assert len(shared.calls) == 1
        """
    )
    result = pytester.runpytest_subprocess()
    result.assert_outcomes(passed=2)
