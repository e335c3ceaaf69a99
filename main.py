"""Launch the orthogonal trajectory and carbon footprint calculators."""

from ortho_calc.app import main

if __name__ == "__main__":
    main()
