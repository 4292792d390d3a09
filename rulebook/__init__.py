"""Rule-text markup engine and prioritized rule search for robotics rulebooks."""
