"""Three-phase balanced graph partitioning: clustering, cluster merge and vertex cut."""