"""Basic Quadrachrome usage examples.

Run directly with:
    python examples/basic_usage.py [output_dir]
"""
import logging
import os
import sys

from quadrachrome import (
    FourPointGradient,
    GradientState,
    IndexOutOfRange,
    evaluate,
    preset_names,
    unit_rgb_to_hex_string,
)


def demonstrate_state() -> None:
    # Mutate a state and read colors back at a few sample positions.
    state = GradientState(width=400, height=300)
    print("Default blend:", state.blend, "exponent:", state.exponent)

    for sample in [(0, 0), (200, 150), (399, 299)]:
        print(f"  {sample} -> {unit_rgb_to_hex_string(evaluate(state, sample))}")

    state.set_point(0, (0.05, 0.05), "#ff8800")
    state.set_blend(1.4)  # clamped to 1.0
    print("After edits, blend:", state.blend, "corner:",
          unit_rgb_to_hex_string(evaluate(state, (0.05, 0.05), normalized=True)))

    try:
        state.set_point(4, (0.5, 0.5))
    except IndexOutOfRange as exc:
        print("Rejected:", exc)


def render_presets(output_dir: str) -> None:
    # One PNG per catalog preset, sharing a single gradient object.
    os.makedirs(output_dir, exist_ok=True)
    grad = FourPointGradient(480, 320)
    for name in preset_names():
        grad.apply_preset(name)
        grad.save(os.path.join(output_dir, f"{name}.png"))


def render_blend_sweep(output_dir: str) -> None:
    grad = FourPointGradient.from_preset("after_effects", 240, 160)
    for step in range(5):
        blend = step / 4
        grad.set_blend(blend)
        grad.save(os.path.join(output_dir, f"blend_{blend:.2f}.png"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    out = sys.argv[1] if len(sys.argv) > 1 else "gradients_out"
    demonstrate_state()
    render_presets(out)
    render_blend_sweep(out)
