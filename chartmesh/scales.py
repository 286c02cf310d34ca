from __future__ import annotations

from decimal import Decimal, InvalidOperation

import numpy as np


def nice_step(span: float, target: int) -> float:
    if span <= 0 or not np.isfinite(span):
        return 1.0
    rough = _nice_number(span, round_result=False)
    return _nice_number(rough / max(target - 1, 1), round_result=True)


def ticks_in_range(vmin: float, vmax: float, step: float) -> np.ndarray:
    lo, hi = min(vmin, vmax), max(vmin, vmax)
    first = np.ceil(lo / step) * step
    ticks = np.arange(first, hi + 0.5 * step, step, dtype=np.float64)
    # Snap floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    eps = step * 1e-9
    return ticks[(ticks >= lo - eps) & (ticks <= hi + eps)]


def limited_nice_ticks(vmin: float, vmax: float, max_count: int) -> np.ndarray:
    if max_count <= 0:
        return np.asarray([], dtype=np.float64)
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)
    step = nice_step(abs(vmax - vmin), max_count)
    ticks = ticks_in_range(vmin, vmax, step)
    while ticks.size > max_count:
        step = _next_nice_step(step)
        ticks = ticks_in_range(vmin, vmax, step)
    return ticks


def tick_step(ticks: np.ndarray) -> float | None:
    if ticks.size < 2:
        return None
    return float(abs(ticks[1] - ticks[0]))


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e6 or (step is not None and abs(step) < 1e-4) or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Only trim trailing zeros for fractional values (keep 30, 40 intact).
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _next_nice_step(step: float) -> float:
    exp = np.floor(np.log10(step))
    frac = step / (10**exp)
    if frac < 1.5:
        return float(2.0 * (10**exp))
    if frac < 3.5:
        return float(5.0 * (10**exp))
    return float(10.0 * (10**exp))


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
