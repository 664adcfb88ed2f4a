"""LottoDesk: lottery ticket and winning-numbers backend."""
