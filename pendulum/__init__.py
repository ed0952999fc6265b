"""Qt rendering of the double pendulum: projection, styles, canvas, view."""
