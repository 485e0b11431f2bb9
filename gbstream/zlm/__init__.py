"""Client and payload types for the ZLMediaKit media server HTTP API."""