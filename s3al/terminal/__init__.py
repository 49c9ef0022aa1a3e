"""Terminal line editing."""