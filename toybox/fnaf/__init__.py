"""A night-watch survival game with roaming animatronics."""