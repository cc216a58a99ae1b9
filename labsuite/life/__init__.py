"""Conway's Game of Life with configurable rules and Life 1.06 file support."""