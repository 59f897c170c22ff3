"""listkit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Combinator invariants enforced across every built-in sequence kind.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep tests fast and deterministic.
- Contract parametrizes sequence kinds to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, property
"""
