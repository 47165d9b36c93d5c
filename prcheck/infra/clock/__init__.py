from prcheck.infra.clock.system import SystemClock

__all__ = ['SystemClock']
