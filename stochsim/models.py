"""Ready-made reaction networks."""

from __future__ import annotations

import math

from .vessel import Vessel


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5))


def abc(a: int, b: int, c: int) -> Vessel:
    """A and C turn A into B, with C acting as a catalyst."""
    v = Vessel()
    A = v.add("A", a)
    B = v.add("B", b)
    C = v.add("C", c)
    v.add_rule(A + C >> 0.001 >> B + C)
    return v


def circadian_rhythm() -> Vessel:
    """A genetic oscillator model of the circadian clock."""
    alpha_a = 50
    alpha_a_bound = 500
    alpha_r = 0.01
    alpha_r_bound = 50
    beta_a = 50
    beta_r = 5
    gamma_a = 1
    gamma_r = 1
    gamma_c = 2
    delta_a = 1
    delta_r = 0.2
    delta_ma = 10
    delta_mr = 0.5
    theta_a = 50
    theta_r = 100

    v = Vessel()
    env = v.add("env", 0, True)
    DA = v.add("DA", 1)
    D_A = v.add("D_A", 0)
    DR = v.add("DR", 1)
    D_R = v.add("D_R", 0)
    MA = v.add("MA", 0)
    MR = v.add("MR", 0)
    A = v.add("A", 0)
    R = v.add("R", 0)
    C = v.add("C", 0)

    v.add_rule(A + DA >> gamma_a >> D_A)
    v.add_rule(D_A >> theta_a >> DA + A)
    v.add_rule(A + DR >> gamma_r >> D_R)
    v.add_rule(D_R >> theta_r >> DR + A)
    v.add_rule(D_A >> alpha_a_bound >> MA + D_A)
    v.add_rule(DA >> alpha_a >> MA + DA)
    v.add_rule(D_R >> alpha_r_bound >> MR + D_R)
    v.add_rule(DR >> alpha_r >> MR + DR)
    v.add_rule(MA >> beta_a >> MA + A)
    v.add_rule(MR >> beta_r >> MR + R)
    v.add_rule(A + R >> gamma_c >> C)
    v.add_rule(C >> delta_a >> R)
    v.add_rule(A >> delta_a >> env)
    v.add_rule(R >> delta_r >> env)
    v.add_rule(MA >> delta_ma >> env)
    v.add_rule(MR >> delta_mr >> env)
    return v


def seihr(n: int) -> Vessel:
    """An SEIHR epidemic model for a population of ``n``."""
    v = Vessel()
    eps = 0.0009
    i0 = _round_half_away(eps * n)
    e0 = _round_half_away(eps * n * 15)
    s0 = n - i0 - e0
    r0 = 2.4
    alpha = 1.0 / 5.1
    gamma = 1.0 / 3.1
    beta = r0 * gamma
    p_h = 0.9e-3
    kappa = gamma * p_h * (1.0 - p_h)
    tau = 1.0 / 10.12

    S = v.add("S", s0)
    E = v.add("E", e0)
    I = v.add("I", i0)
    H = v.add("H", 0)
    R = v.add("R", 0)
    v.add_rule(S + I >> beta / n >> E + I)
    v.add_rule(E >> alpha >> I)
    v.add_rule(I >> gamma >> R)
    v.add_rule(I >> kappa >> H)
    v.add_rule(H >> tau >> R)
    return v