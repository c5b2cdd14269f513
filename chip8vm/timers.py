def tick(state):
    """Count both timers down by one, stopping at zero."""
    if state.delay_timer > 0:
        state.delay_timer -= 1
    if state.sound_timer > 0:
        state.sound_timer -= 1
