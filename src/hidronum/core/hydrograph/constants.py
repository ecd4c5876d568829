"""
Constantes para hidrogramas unitarios.

Referencia: NEH Part 630, Cap. 16 (2007).
"""

# Factor de forma m de la distribución Gamma según Peak Rate Factor (PRF)
# PRF 100 terreno plano ... PRF 600 terreno muy empinado
GAMMA_SHAPE_BY_PRF = {
    101: 0.26,
    238: 1.0,
    349: 2.0,
    433: 3.0,
    484: 3.7,
    504: 4.0,
    566: 5.0,
}

# Kerby-Kirpich: (K canal, M flujo superficial) por sistema de unidades
KERBY_KIRPICH_COEFFICIENTS = {
    "si": (0.0078, 1.44),   # longitud en pies
    "m": (0.0195, 0.828),   # longitud en metros
}

# Conversión de PRF a m³/s por cm de escorrentía con área en km²
# qp = 484 A / Tp [cfs/in, mi²]  ≡  2.08 A / Tp [m³/s/cm, km²]
METRIC_PRF_CONVERSION = 2.08 / 484

# Intervalo del hidrograma unitario como fracción de Tc (ΔD = 0.133 Tc)
DT_TC_RATIO = 0.133

# Conversión del volumen de escorrentía a lámina: pulgadas (si) o cm (m)
RUNOFF_DEPTH_FACTOR = {
    "si": 12.0,
    "m": 100.0,
}
