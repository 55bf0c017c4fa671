"""Physical constants shared by the parameterization families."""

R_GAS = 8.314462618  # J/mol/K
ONE_ATM = 101325.0  # Pa
