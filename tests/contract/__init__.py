"""Contract tests.

Purpose
- State each combinator's behavior once and run it against every built-in
  sequence kind, so lists, tuples, strings, bytes and deques stay
  interchangeable.

Guidelines
- Build inputs and expectations with the ``seq``/``el``/``seqs`` fixtures,
  never with a concrete container.
- Assert only public results (values, kinds, raised errors).
- Property-based tests parametrize kinds explicitly instead of using the
  function-scoped ``kind_name`` fixture.
"""
