"""Breakout: paddle, ball and breakable bricks."""